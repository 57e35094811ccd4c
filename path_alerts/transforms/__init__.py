"""Transform functions for parsing PATH station alerts."""

from .timestamps import resolve_timestamp

from .normalize import clean_alert_text

from .routes import (
    ROUTE_ABBREVIATIONS,
    default_agency_id,
    find_route_ids,
)

from .parse_alerts import (
    clean_record,
    extract_alerts,
    extract_station_alerts,
)

__all__ = [
    # Timestamps
    "resolve_timestamp",
    # Text
    "clean_alert_text",
    # Routes
    "ROUTE_ABBREVIATIONS",
    "default_agency_id",
    "find_route_ids",
    # Station blocks
    "clean_record",
    "extract_alerts",
    "extract_station_alerts",
]
