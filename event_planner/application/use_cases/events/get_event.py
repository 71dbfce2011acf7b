"""Use case for retrieving a single event."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import Event, User

from ..access import load_event_for_member


def get_event(session: Session, event_id: int, *, current_user: User) -> Event:
    """Return the event if the current user may see it."""

    return load_event_for_member(session, event_id, current_user)
