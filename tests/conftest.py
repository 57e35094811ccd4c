"""Shared fixtures for PATH alerts tests."""

import pytest

from path_alerts.models import Agency, Route, TransitReference

NOW = 1700000000

# 2025-11-25T23:21:00Z
POSTED_AT = 1764112860


def station_block(date="11/25/2025", time="11:21 PM", text="Service is delayed."):
    """Render one station block the way the PATH bulletin lays it out."""
    cells = ""
    if date is not None:
        cells += f"<td><strong><span>{date}</span></strong></td>"
    if time is not None:
        cells += f"<td><strong><span>{time}</span></strong></td>"
    alert = f'<span class="alertText">{text}</span>' if text is not None else ""
    return (
        '<div class="station">'
        '<div class="stationName">'
        f"<table><tr><td><h3>Station</h3></td>{cells}</tr></table>"
        "</div>"
        f'<div class="alertBody"><p>{alert}</p></div>'
        "</div>"
    )


def bulletin(*blocks):
    return "<html><body><div class='alerts'>" + "".join(blocks) + "</div></body></html>"


@pytest.fixture
def reference() -> TransitReference:
    return TransitReference(
        routes=(
            Route(route_id="R1", long_name="Newark - World Trade Center"),
            Route(route_id="R2", long_name="Hoboken - World Trade Center"),
            Route(route_id="R3", long_name="Journal Square - 33rd Street"),
            Route(route_id="R4", long_name="Hoboken - 33rd Street"),
            Route(route_id="R5", long_name=None),
        ),
        agencies=(Agency(agency_id="151"),),
    )
