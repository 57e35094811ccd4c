"""
Route Resolution

Maps the line abbreviations used in alert text (e.g. "NWK-WTC") to route ids
from the GTFS static dataset.
"""

from typing import List, Optional

from path_alerts.models import DEFAULT_AGENCY_ID, TransitReference

# Abbreviation used in alert text -> GTFS route_long_name
ROUTE_ABBREVIATIONS = [
    ("NWK-WTC", "Newark - World Trade Center"),
    ("HOB-WTC", "Hoboken - World Trade Center"),
    ("JSQ-33", "Journal Square - 33rd Street"),
    ("HOB-33", "Hoboken - 33rd Street"),
]


def find_route_ids(text: str, reference: Optional[TransitReference]) -> List[str]:
    """Find route ids for every line abbreviation mentioned in the text.

    Routes sharing a long name are all returned, in reference order.

    Args:
        text: Cleaned alert text
        reference: Reference routes, or None when no dataset is loaded

    Returns:
        Matching route ids; empty when the alert names no known line
    """
    if reference is None:
        return []

    found_routes = []
    for abbr, long_name in ROUTE_ABBREVIATIONS:
        if abbr not in text:
            continue
        for route in reference.routes:
            if route.long_name == long_name:
                found_routes.append(route.route_id)
    return found_routes


def default_agency_id(reference: Optional[TransitReference]) -> str:
    """Agency id of the first reference agency, or the PATH literal."""
    if reference is not None and reference.agencies:
        agency_id = reference.agencies[0].agency_id
        if agency_id is not None:
            return agency_id
    return DEFAULT_AGENCY_ID
