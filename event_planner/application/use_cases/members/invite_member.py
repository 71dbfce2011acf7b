"""Use case for adding a user to an event."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_JOIN_EVENT,
    ENTITY_EVENT,
    MEMBER_ROLE_MEMBER,
    EventMember,
    User,
)
from event_planner.domain.errors import ConflictError, NotFoundError
from event_planner.infrastructure.realtime import CHANGE_INSERT, publish_change
from event_planner.infrastructure.repositories import (
    EventMemberRepository,
    UserRepository,
)

from ..access import load_event_for_owner
from ..activity_logs import log_activity


def invite_member(
    session: Session,
    *,
    event_id: int,
    user_id: int,
    current_user: User,
    role: str | None = None,
) -> EventMember:
    """Add ``user_id`` to the event; only the owner may invite."""

    event = load_event_for_owner(session, event_id, current_user)

    invitee = UserRepository(session).get(user_id)
    if invitee is None or not invitee.is_active:
        raise NotFoundError("USER_NOT_FOUND", f"User {user_id} does not exist")

    repository = EventMemberRepository(session)
    if repository.get(event_id, user_id) is not None:
        raise ConflictError(
            "MEMBER_ALREADY_EXISTS",
            f"{invitee.display_name()} is already a member of this event",
        )

    member = repository.add(event_id, user_id, role or MEMBER_ROLE_MEMBER)

    log_activity(
        session,
        user_id=user_id,
        event_id=event_id,
        action_type=ACTION_JOIN_EVENT,
        entity_type=ENTITY_EVENT,
        entity_title=event.title,
        metadata={"invited_by": current_user.id},
    )
    publish_change(event_id, table="event_members", change=CHANGE_INSERT, new=member)
    return member
