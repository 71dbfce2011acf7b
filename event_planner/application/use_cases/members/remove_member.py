"""Use case for removing a user from an event."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import User
from event_planner.domain.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from event_planner.infrastructure.realtime import CHANGE_DELETE, publish_change
from event_planner.infrastructure.repositories import EventMemberRepository

from ..access import load_event_for_member


def remove_member(
    session: Session, *, event_id: int, user_id: int, current_user: User
) -> None:
    """Remove a member; the owner removes anyone, members may only leave."""

    event = load_event_for_member(session, event_id, current_user)
    if not event.is_owner(current_user.id) and user_id != current_user.id:
        raise PermissionDeniedError(
            "EVENT_OWNER_REQUIRED", "Only the event owner can remove other members"
        )
    if event.is_owner(user_id):
        raise InvalidInputError(
            "OWNER_CANNOT_LEAVE",
            "The event owner cannot be removed from the event",
            hint="Delete the event instead.",
        )

    repository = EventMemberRepository(session)
    member = repository.get(event_id, user_id)
    if member is None or not repository.remove(event_id, user_id):
        raise NotFoundError("MEMBER_NOT_FOUND", "This user is not a member of the event")

    publish_change(event_id, table="event_members", change=CHANGE_DELETE, old=member)
