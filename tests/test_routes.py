"""Tests for path_alerts.transforms.routes module."""

from path_alerts.models import Agency, Route, TransitReference
from path_alerts.transforms.routes import (
    ROUTE_ABBREVIATIONS,
    default_agency_id,
    find_route_ids,
)


class TestFindRouteIds:
    def test_single_abbreviation(self, reference) -> None:
        assert find_route_ids("NWK-WTC trains are delayed.", reference) == ["R1"]

    def test_multiple_abbreviations_follow_table_order(self, reference) -> None:
        text = "HOB-33 and NWK-WTC trains are delayed."
        assert find_route_ids(text, reference) == ["R1", "R4"]

    def test_all_routes_sharing_long_name(self) -> None:
        reference = TransitReference(
            routes=(
                Route(route_id="A", long_name="Newark - World Trade Center"),
                Route(route_id="B", long_name="Hoboken - World Trade Center"),
                Route(route_id="C", long_name="Newark - World Trade Center"),
            )
        )
        assert find_route_ids("NWK-WTC delays", reference) == ["A", "C"]

    def test_duplicate_route_ids_are_kept(self) -> None:
        reference = TransitReference(
            routes=(
                Route(route_id="X", long_name="Journal Square - 33rd Street"),
                Route(route_id="X", long_name="Journal Square - 33rd Street"),
            )
        )
        assert find_route_ids("JSQ-33", reference) == ["X", "X"]

    def test_no_abbreviation(self, reference) -> None:
        assert find_route_ids("Elevator out of service at Grove St.", reference) == []

    def test_abbreviation_without_matching_route(self) -> None:
        reference = TransitReference(routes=(Route(route_id="R9", long_name="Other Line"),))
        assert find_route_ids("NWK-WTC delays", reference) == []

    def test_long_name_must_match_exactly(self) -> None:
        reference = TransitReference(
            routes=(Route(route_id="R1", long_name="Newark - World Trade Center "),)
        )
        assert find_route_ids("NWK-WTC delays", reference) == []

    def test_match_is_case_sensitive(self, reference) -> None:
        assert find_route_ids("nwk-wtc delays", reference) == []

    def test_without_reference(self) -> None:
        assert find_route_ids("NWK-WTC delays", None) == []

    def test_abbreviation_table(self) -> None:
        assert [abbr for abbr, _ in ROUTE_ABBREVIATIONS] == [
            "NWK-WTC",
            "HOB-WTC",
            "JSQ-33",
            "HOB-33",
        ]


class TestDefaultAgencyId:
    def test_first_agency(self) -> None:
        reference = TransitReference(agencies=(Agency("151"), Agency("152")))
        assert default_agency_id(reference) == "151"

    def test_first_agency_without_id(self) -> None:
        reference = TransitReference(agencies=(Agency(None), Agency("152")))
        assert default_agency_id(reference) == "PATH"

    def test_no_agencies(self) -> None:
        assert default_agency_id(TransitReference()) == "PATH"

    def test_no_reference(self) -> None:
        assert default_agency_id(None) == "PATH"
