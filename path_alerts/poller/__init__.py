"""Long-running poller that publishes the PATH alerts feed."""

from .alerts_poller import AlertsPoller

__all__ = ["AlertsPoller"]
