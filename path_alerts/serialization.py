"""
GTFS-RT Serialization

Converts a FeedMessage into the GTFS-RT protobuf and its JSON rendering.
"""

import json

from google.protobuf.json_format import MessageToDict
from google.transit import gtfs_realtime_pb2

from path_alerts.models import AlertEntity, FeedMessage

# feed_version is a recent addition to FeedHeader; older bindings lack it
HAS_FEED_VERSION = "feed_version" in gtfs_realtime_pb2.FeedHeader.DESCRIPTOR.fields_by_name


def _fill_alert(pb_alert, entity: AlertEntity) -> None:
    period = pb_alert.active_period.add()
    period.start = entity.active_period_start

    for selector in entity.informed_entities:
        informed = pb_alert.informed_entity.add()
        informed.agency_id = selector.agency_id
        if selector.route_id is not None:
            informed.route_id = selector.route_id

    pb_alert.cause = gtfs_realtime_pb2.Alert.Cause.Value(entity.cause)
    pb_alert.effect = gtfs_realtime_pb2.Alert.Effect.Value(entity.effect)

    translation = pb_alert.description_text.translation.add()
    translation.text = entity.description
    translation.language = entity.language


def to_protobuf(feed: FeedMessage) -> gtfs_realtime_pb2.FeedMessage:
    """Build the GTFS-RT FeedMessage protobuf for a feed."""
    message = gtfs_realtime_pb2.FeedMessage()

    header = message.header
    header.gtfs_realtime_version = feed.gtfs_realtime_version
    header.incrementality = gtfs_realtime_pb2.FeedHeader.Incrementality.Value(
        feed.incrementality
    )
    header.timestamp = feed.timestamp
    if HAS_FEED_VERSION:
        header.feed_version = feed.feed_version

    for entity in feed.entities:
        pb_entity = message.entity.add()
        pb_entity.id = entity.id
        _fill_alert(pb_entity.alert, entity)

    return message


def to_bytes(feed: FeedMessage) -> bytes:
    return to_protobuf(feed).SerializeToString()


def to_dict(feed: FeedMessage) -> dict:
    return MessageToDict(to_protobuf(feed), preserving_proto_field_name=True)


def to_json(feed: FeedMessage, indent=None) -> str:
    return json.dumps(to_dict(feed), indent=indent)
