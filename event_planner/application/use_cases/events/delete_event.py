"""Use case for deleting events."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import User
from event_planner.infrastructure.repositories import EventRepository

from ..access import load_event_for_owner


def delete_event(session: Session, event_id: int, *, current_user: User) -> None:
    """Delete the event with its tasks and memberships."""

    load_event_for_owner(session, event_id, current_user)
    EventRepository(session).delete(event_id)
