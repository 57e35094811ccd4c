"""
Record and Feed Types

Immutable value types passed between the extraction steps and the feed
assembler, plus the read-only reference data projection.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

GTFS_REALTIME_VERSION = "2.0"
FEED_VERSION = "1.0"
DEFAULT_AGENCY_ID = "PATH"
UNKNOWN_CAUSE = "UNKNOWN_CAUSE"
UNKNOWN_EFFECT = "UNKNOWN_EFFECT"


@dataclass(frozen=True)
class StationAlertRecord:
    """One alert extracted from a station block, before text cleanup."""

    sequence_index: int
    timestamp: int
    raw_text: str


@dataclass(frozen=True)
class CleanedAlertRecord:
    """A station alert whose text has been normalized and is non-empty."""

    sequence_index: int
    timestamp: int
    text: str


@dataclass(frozen=True)
class Route:
    route_id: str
    long_name: Optional[str] = None


@dataclass(frozen=True)
class Agency:
    agency_id: Optional[str] = None


@dataclass(frozen=True)
class TransitReference:
    """Routes and agencies projected out of a GTFS static dataset."""

    routes: Tuple[Route, ...] = ()
    agencies: Tuple[Agency, ...] = ()


@dataclass(frozen=True)
class EntitySelector:
    agency_id: str
    route_id: Optional[str] = None


@dataclass(frozen=True)
class AlertEntity:
    """A single alert in the output feed.

    An empty ``route_ids`` means the alert applies to the whole agency.
    Duplicate route ids are kept as resolved.
    """

    id: str
    active_period_start: int
    agency_id: str
    route_ids: Tuple[str, ...]
    description: str
    language: str = "en"
    cause: str = UNKNOWN_CAUSE
    effect: str = UNKNOWN_EFFECT

    @property
    def informed_entities(self) -> List[EntitySelector]:
        if not self.route_ids:
            return [EntitySelector(agency_id=self.agency_id)]
        return [
            EntitySelector(agency_id=self.agency_id, route_id=route_id)
            for route_id in self.route_ids
        ]


@dataclass(frozen=True)
class FeedMessage:
    """Full-replacement alert feed produced by one pipeline run."""

    timestamp: int
    entities: Tuple[AlertEntity, ...] = field(default_factory=tuple)
    gtfs_realtime_version: str = GTFS_REALTIME_VERSION
    incrementality: str = "FULL_DATASET"
    feed_version: str = FEED_VERSION
