"""
GTFS Static Reference Loader

Reads the routes and agencies PATH publishes in its GTFS static archive.
Only route ids, route long names and agency ids are kept.
"""

import csv
import io
import logging
import zipfile
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

import requests

from path_alerts.config import get_config
from path_alerts.models import Agency, Route, TransitReference

logger = logging.getLogger(__name__)


class ReferenceDataError(RuntimeError):
    """The GTFS archive could not be read."""


def iter_csv(zf: zipfile.ZipFile, member_name: str) -> Iterator[Dict[str, str]]:
    with zf.open(member_name) as fh:
        reader = csv.DictReader(io.TextIOWrapper(fh, encoding="utf-8-sig"))
        for row in reader:
            yield row


def has_member(zf: zipfile.ZipFile, member_name: str) -> bool:
    return member_name in zf.namelist()


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def read_reference(zf: zipfile.ZipFile) -> TransitReference:
    """Project routes.txt and agency.txt out of an open GTFS archive."""
    if not has_member(zf, "routes.txt"):
        raise ReferenceDataError("GTFS archive has no routes.txt")

    routes = tuple(
        Route(
            route_id=row["route_id"].strip(),
            long_name=_blank_to_none(row.get("route_long_name")),
        )
        for row in iter_csv(zf, "routes.txt")
        if (row.get("route_id") or "").strip()
    )

    agencies = ()
    if has_member(zf, "agency.txt"):
        agencies = tuple(
            Agency(agency_id=_blank_to_none(row.get("agency_id")))
            for row in iter_csv(zf, "agency.txt")
        )

    return TransitReference(routes=routes, agencies=agencies)


def download_archive(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[int] = None,
) -> bytes:
    """Download a GTFS zip, raising on HTTP errors."""
    http = session or requests
    if timeout is None:
        timeout = get_config().request_timeout_seconds
    response = http.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def load_reference(
    source: Union[str, Path],
    session: Optional[requests.Session] = None,
    timeout: Optional[int] = None,
) -> TransitReference:
    """Load reference routes/agencies from a GTFS zip path or URL.

    Args:
        source: Local path to the archive, or an http(s) URL
        session: Optional requests session for URL sources
        timeout: Download timeout in seconds; defaults to the configured one

    Returns:
        TransitReference with routes in file order

    Raises:
        ReferenceDataError: If the archive is unreadable or has no routes.txt
        requests.exceptions.RequestException: If the download fails
    """
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        data = io.BytesIO(download_archive(source_str, session, timeout))
    else:
        data = source_str

    try:
        with zipfile.ZipFile(data) as zf:
            reference = read_reference(zf)
    except (zipfile.BadZipFile, KeyError, OSError, UnicodeDecodeError, csv.Error) as e:
        raise ReferenceDataError(f"Failed to read GTFS archive {source_str}: {e}") from e

    logger.info(
        f"Loaded GTFS reference: {len(reference.routes)} routes, "
        f"{len(reference.agencies)} agencies"
    )
    return reference
