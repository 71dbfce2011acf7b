"""Use case for listing the events visible to a user."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import Event, User
from event_planner.infrastructure.repositories import EventRepository

from .filters import EventDateFilters, filter_events, sort_events


def list_events(
    session: Session,
    *,
    current_user: User,
    query: str | None = None,
    date_filters: EventDateFilters | None = None,
    sort_by: str | None = None,
) -> list[Event]:
    """Return owned and joined events after filtering and sorting."""

    events = EventRepository(session).list_for_user(current_user.id)
    filtered = filter_events(events, query, date_filters)
    return sort_events(filtered, sort_by)
