"""Use case for patching events."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from event_planner.domain.entities import ACTION_UPDATE_EVENT, ENTITY_EVENT, Event, User
from event_planner.infrastructure.repositories import EventRepository

from ..access import load_event_for_owner
from ..activity_logs import log_activity
from .create_event import ensure_valid_schedule

_PATCHABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "location",
        "cover_image_uri",
        "color",
        "start_at",
        "end_at",
    }
)


def update_event(
    session: Session,
    *,
    event_id: int,
    changes: Mapping[str, Any],
    current_user: User,
) -> Event:
    """Apply the provided fields to the event; only the owner may do so."""

    current = load_event_for_owner(session, event_id, current_user)
    patch = {key: value for key, value in changes.items() if key in _PATCHABLE_FIELDS}
    if not patch:
        return current

    updated = replace(current, **patch)
    ensure_valid_schedule(updated.start_at, updated.end_at)
    event = EventRepository(session).update(updated)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=event.id,
        action_type=ACTION_UPDATE_EVENT,
        entity_type=ENTITY_EVENT,
        entity_title=event.title,
        metadata={"fields": sorted(patch)},
    )
    return event
