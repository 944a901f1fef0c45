"""Per-unit feedback accumulation."""

from .collector import FeedbackCollector, GroupedFeedback, LocationFeedback, SupportsGroupedFeedback

__all__ = [
    "FeedbackCollector",
    "GroupedFeedback",
    "LocationFeedback",
    "SupportsGroupedFeedback",
]
