"""Product analytics forwarding."""

from .analytics import AnalyticsEvent, AnalyticsManager

__all__ = [
    "AnalyticsEvent",
    "AnalyticsManager"
]
