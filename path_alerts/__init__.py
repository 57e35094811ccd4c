"""PATH alert bulletin to GTFS-RT service alerts."""

from .pipeline import (
    EnvelopeError,
    fetch_path_alerts,
    parse_path_alerts,
)

__all__ = [
    "EnvelopeError",
    "fetch_path_alerts",
    "parse_path_alerts",
]
