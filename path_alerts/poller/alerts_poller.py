"""
PATH Alerts Poller

Fetches the PATH alert bulletin, converts it to a GTFS-RT alerts feed,
and publishes the serialized feed to Pub/Sub.
"""

import argparse
import logging
import time
from typing import Optional

import requests
from google.cloud import pubsub_v1

from path_alerts.config import Config, get_config
from path_alerts.models import TransitReference
from path_alerts.pipeline import decode_envelope, parse_path_alerts
from path_alerts.reference import ReferenceDataError, load_reference
from path_alerts.serialization import to_bytes, to_json

logger = logging.getLogger(__name__)


class AlertsPoller:
    """Fetches PATH alerts, builds the GTFS-RT feed, and publishes it to Pub/Sub."""

    def __init__(self, config: Optional[Config] = None, publisher=None, session=None):
        self.config = config or get_config()
        self.topic_path = self.config.alerts_topic
        self._publisher = publisher
        self._session = session or requests.Session()
        self._reference: Optional[TransitReference] = None
        self._reference_loaded = False

    @property
    def publisher(self):
        if self._publisher is None:
            self._publisher = pubsub_v1.PublisherClient()
        return self._publisher

    def load_reference(self) -> Optional[TransitReference]:
        """Load the GTFS static dataset once; None means agency-wide scoping."""
        if not self._reference_loaded:
            try:
                self._reference = load_reference(
                    self.config.gtfs_static_url,
                    self._session,
                    timeout=self.config.request_timeout_seconds,
                )
            except (ReferenceDataError, requests.exceptions.RequestException) as e:
                logger.error(f"Failed to load GTFS reference, alerts will be agency-wide: {e}")
                self._reference = None
            self._reference_loaded = True
        return self._reference

    def fetch_content(self) -> Optional[str]:
        """Fetch the alerts envelope and return its HTML bulletin."""
        for attempt in range(self.config.max_retries):
            try:
                response = self._session.get(
                    self.config.alerts_url,
                    timeout=self.config.request_timeout_seconds,
                )
                response.raise_for_status()
                return decode_envelope(response.json())
            except (requests.exceptions.RequestException, ValueError) as e:
                logger.warning(f"Fetch failed (attempt {attempt + 1}): {e}")
                if attempt < self.config.max_retries - 1:
                    time.sleep(self.config.retry_backoff_seconds * (2 ** attempt))
        return None

    def publish(self, data: bytes) -> bool:
        """Publish serialized feed bytes to Pub/Sub."""
        try:
            future = self.publisher.publish(
                self.topic_path,
                data,
                feed_type="gtfs-rt-alerts",
                feed_id="path",
            )
            future.result(timeout=30)
            return True
        except Exception as e:
            logger.error(f"Failed to publish: {e}")
            return False

    def poll_once(self) -> dict:
        """Perform a single poll cycle."""
        content = self.fetch_content()
        if content is None:
            return {"success": False, "bytes": 0, "entities": 0}

        feed = parse_path_alerts(content, self.load_reference())
        data = to_bytes(feed)

        if not self.topic_path:
            return {"success": True, "bytes": len(data), "entities": len(feed.entities)}

        published = self.publish(data)
        return {"success": published, "bytes": len(data), "entities": len(feed.entities)}

    def run(self):
        """Poll forever at the configured interval; a failed cycle is logged and skipped."""
        interval = self.config.poll_interval_seconds
        logger.info(f"Starting PATH alerts poller, interval: {interval}s, topic: {self.topic_path or '(none)'}")
        while True:
            started = time.monotonic()
            try:
                result = self.poll_once()
            except Exception:
                logger.exception("Poll cycle raised")
            else:
                if not result["success"]:
                    logger.warning("Poll failed")
            time.sleep(max(0, interval - (time.monotonic() - started)))


def print_once(poller: AlertsPoller) -> int:
    """Fetch and print the current feed as JSON."""
    content = poller.fetch_content()
    if content is None:
        logger.error("Could not fetch PATH alerts")
        return 1
    feed = parse_path_alerts(content, poller.load_reference())
    print(to_json(feed, indent=2))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Publish PATH alerts as a GTFS-RT feed")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch once, print the feed as JSON and exit"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    poller = AlertsPoller()
    if args.once:
        return print_once(poller)
    poller.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
