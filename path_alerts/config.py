"""Configuration for the PATH alerts fetcher and poller."""

import os
from dataclasses import dataclass
from functools import lru_cache

ALERTS_URL = (
    "https://path-mppprod-app.azurewebsites.net/api/v1/AppContent/fetch?contentKey=PathAlert"
)
GTFS_STATIC_URL = "http://data.trilliumtransit.com/gtfs/path-nj-us/path-nj-us.zip"


def _env_number(name: str, default, cast):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {value!r}") from None


@dataclass(frozen=True)
class Config:
    alerts_url: str = ALERTS_URL
    gtfs_static_url: str = GTFS_STATIC_URL
    alerts_topic: str = ""  # projects/PROJECT/topics/TOPIC, empty disables publishing
    poll_interval_seconds: int = 60
    request_timeout_seconds: int = 30
    max_retries: int = 3
    retry_backoff_seconds: float = 2.0

    @classmethod
    def from_env(cls) -> "Config":
        """Build a Config from environment variables, keeping defaults for unset ones."""
        defaults = cls()
        return cls(
            alerts_url=os.environ.get("PATH_ALERTS_URL") or defaults.alerts_url,
            gtfs_static_url=os.environ.get("PATH_GTFS_STATIC_URL") or defaults.gtfs_static_url,
            alerts_topic=os.environ.get("PATH_ALERTS_TOPIC", defaults.alerts_topic),
            poll_interval_seconds=_env_number(
                "POLL_INTERVAL_SECONDS", defaults.poll_interval_seconds, int
            ),
            request_timeout_seconds=_env_number(
                "REQUEST_TIMEOUT_SECONDS", defaults.request_timeout_seconds, int
            ),
            max_retries=_env_number("MAX_RETRIES", defaults.max_retries, int),
            retry_backoff_seconds=_env_number(
                "RETRY_BACKOFF_SECONDS", defaults.retry_backoff_seconds, float
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    return Config.from_env()
