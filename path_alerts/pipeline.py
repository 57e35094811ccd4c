"""
PATH Alerts Pipeline

Entry points that turn the PATH alert bulletin into a GTFS-RT feed:

    parse_path_alerts(content, reference)   raw HTML -> FeedMessage
    fetch_path_alerts(reference)            fetch envelope, then parse
"""

import logging
import time
from typing import Optional

import requests

from path_alerts.config import Config, get_config
from path_alerts.feed import build_feed
from path_alerts.models import FeedMessage, TransitReference
from path_alerts.transforms import extract_alerts

logger = logging.getLogger(__name__)

CONTENT_FIELD = "Content"


class EnvelopeError(ValueError):
    """The alerts endpoint returned a body without an HTML bulletin."""


def parse_path_alerts(
    content: str,
    reference: Optional[TransitReference] = None,
    current_timestamp: Optional[int] = None,
) -> FeedMessage:
    """Parse the HTML bulletin into a GTFS-RT alerts feed.

    Args:
        content: Raw HTML bulletin
        reference: GTFS static routes/agencies; without it every alert
            is scoped to the whole agency
        current_timestamp: Run start time in Unix seconds; read from the
            clock when omitted

    Returns:
        FeedMessage with one entity per station block that has alert text
    """
    if current_timestamp is None:
        current_timestamp = int(time.time())

    records = extract_alerts(content, current_timestamp)
    return build_feed(records, reference, current_timestamp)


def decode_envelope(data) -> str:
    """Pull the HTML bulletin out of the decoded JSON envelope."""
    if not isinstance(data, dict):
        raise EnvelopeError(f"Expected a JSON object, got {type(data).__name__}")
    content = data.get(CONTENT_FIELD)
    if not isinstance(content, str):
        raise EnvelopeError(f"Envelope has no {CONTENT_FIELD!r} string field")
    return content


def fetch_envelope(
    config: Optional[Config] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Fetch the alerts envelope and return its HTML bulletin.

    Raises:
        requests.exceptions.RequestException: On transport or HTTP errors
        EnvelopeError: If the body is not the expected JSON object
    """
    config = config or get_config()
    http = session or requests
    response = http.get(config.alerts_url, timeout=config.request_timeout_seconds)
    response.raise_for_status()
    try:
        data = response.json()
    except ValueError as e:
        raise EnvelopeError(f"Alerts response is not JSON: {e}") from e
    return decode_envelope(data)


def fetch_path_alerts(
    reference: Optional[TransitReference] = None,
    config: Optional[Config] = None,
    session: Optional[requests.Session] = None,
) -> FeedMessage:
    """Fetch the current bulletin and parse it into a feed."""
    content = fetch_envelope(config, session)
    return parse_path_alerts(content, reference)
