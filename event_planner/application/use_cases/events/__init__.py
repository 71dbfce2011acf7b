"""Use cases for managing events."""

from .create_event import create_event
from .delete_event import delete_event
from .filters import EventDateFilters, filter_events, sort_events
from .get_event import get_event
from .list_events import list_events
from .update_event import update_event

__all__ = [
    "EventDateFilters",
    "create_event",
    "delete_event",
    "filter_events",
    "get_event",
    "list_events",
    "sort_events",
    "update_event",
]
