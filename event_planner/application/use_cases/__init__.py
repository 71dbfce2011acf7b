"""Aggregate application use cases."""

from .activity import get_recent_activity
from .activity_logs import get_event_activities, get_personal_activities, log_activity

__all__ = [
    "get_event_activities",
    "get_personal_activities",
    "get_recent_activity",
    "log_activity",
]
