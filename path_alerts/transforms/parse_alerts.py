"""
Parse Station Alert Blocks

Extracts one record per station block from the HTML bulletin PATH publishes
inside its app-content JSON envelope.
"""

import logging
from typing import List, Optional

from lxml import etree
from lxml import html as lxml_html
from lxml.cssselect import CSSSelector

from path_alerts.models import CleanedAlertRecord, StationAlertRecord
from path_alerts.transforms.normalize import clean_alert_text
from path_alerts.transforms.timestamps import resolve_timestamp

logger = logging.getLogger(__name__)

STATION_SELECTOR = CSSSelector("div.station")
DATE_SELECTOR = CSSSelector("div.stationName table tr td strong span")
TEXT_SELECTOR = CSSSelector("span.alertText")

# The bulletin sometimes emits a bare "&quot" where a quote belongs
QUOTE_ENTITY = "&quot"

HTML_PARSER = lxml_html.HTMLParser(encoding="utf-8")


def element_text(element) -> str:
    """Concatenated text of an element and its descendants, trimmed."""
    return element.text_content().strip()


def first_text(elements: List, position: int) -> str:
    if len(elements) > position:
        return element_text(elements[position])
    return ""


def extract_station_alerts(content: str, current_timestamp: int) -> List[StationAlertRecord]:
    """Extract a record for every station block, in document order.

    Blocks with a missing date, time or text still yield a record; the
    timestamp falls back to ``current_timestamp`` and the text is empty.

    Args:
        content: Raw HTML bulletin
        current_timestamp: Pipeline start time in Unix seconds

    Returns:
        One StationAlertRecord per station block
    """
    clean_content = content.replace(QUOTE_ENTITY, '"')
    if not clean_content.strip():
        return []

    try:
        document = lxml_html.document_fromstring(
            clean_content.encode("utf-8"), parser=HTML_PARSER
        )
    except etree.ParserError as e:
        logger.debug(f"Bulletin has no parseable markup: {e}")
        return []

    records = []
    for index, element in enumerate(STATION_SELECTOR(document)):
        date_time = DATE_SELECTOR(element)
        date_str = first_text(date_time, 0)
        time_str = first_text(date_time, 1)

        text_elements = TEXT_SELECTOR(element)
        alert_text = first_text(text_elements, 0)

        records.append(
            StationAlertRecord(
                sequence_index=index,
                timestamp=resolve_timestamp(date_str, time_str, current_timestamp),
                raw_text=alert_text,
            )
        )

    logger.debug(f"Extracted {len(records)} station blocks")
    return records


def clean_record(record: StationAlertRecord) -> Optional[CleanedAlertRecord]:
    """Normalize a record's text, returning None if nothing is left."""
    text = clean_alert_text(record.raw_text)
    if not text:
        logger.debug(f"Dropping station block {record.sequence_index}: no alert text")
        return None
    return CleanedAlertRecord(
        sequence_index=record.sequence_index,
        timestamp=record.timestamp,
        text=text,
    )


def extract_alerts(content: str, current_timestamp: int) -> List[CleanedAlertRecord]:
    """Extract station blocks and keep those with alert text after cleanup."""
    cleaned = []
    for record in extract_station_alerts(content, current_timestamp):
        cleaned_record = clean_record(record)
        if cleaned_record is not None:
            cleaned.append(cleaned_record)
    return cleaned
