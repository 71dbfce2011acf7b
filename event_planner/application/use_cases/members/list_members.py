"""Use case for listing event members."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from event_planner.domain.entities import EventMember, User
from event_planner.infrastructure.repositories import EventMemberRepository

from ..access import load_event_for_member


def list_members(
    session: Session, event_id: int, *, current_user: User
) -> Sequence[EventMember]:
    """Return the membership records of an event visible to the current user."""

    load_event_for_member(session, event_id, current_user)
    return EventMemberRepository(session).list(event_id)
