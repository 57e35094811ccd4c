"""
Feed Assembly

Builds GTFS-RT alert entities from cleaned station records and wraps them in
a full-dataset feed header.
"""

import logging
from typing import Iterable, Optional

from path_alerts.models import (
    AlertEntity,
    CleanedAlertRecord,
    FeedMessage,
    TransitReference,
)
from path_alerts.transforms.routes import default_agency_id, find_route_ids

logger = logging.getLogger(__name__)

ENTITY_ID_PREFIX = "path_alert_"


def build_entity(
    record: CleanedAlertRecord,
    reference: Optional[TransitReference],
) -> AlertEntity:
    """Build the alert entity for one cleaned record.

    The id comes from the record's position among all station blocks,
    so ids skip over blocks that were dropped.
    """
    return AlertEntity(
        id=f"{ENTITY_ID_PREFIX}{record.sequence_index}",
        active_period_start=record.timestamp,
        agency_id=default_agency_id(reference),
        route_ids=tuple(find_route_ids(record.text, reference)),
        description=record.text,
    )


def build_feed(
    records: Iterable[CleanedAlertRecord],
    reference: Optional[TransitReference],
    current_timestamp: int,
) -> FeedMessage:
    """Assemble a full-replacement feed message.

    Args:
        records: Cleaned records in document order
        reference: Reference routes/agencies, or None for agency-wide scoping
        current_timestamp: Pipeline start time, used as the header timestamp

    Returns:
        FeedMessage with one entity per record
    """
    entities = tuple(build_entity(record, reference) for record in records)
    scoped = sum(1 for entity in entities if entity.route_ids)
    logger.info(f"Built feed: {len(entities)} alerts, {scoped} route-scoped")
    return FeedMessage(timestamp=current_timestamp, entities=entities)
