"""Use case for creating events."""

from datetime import datetime

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_CREATE_EVENT,
    DEFAULT_EVENT_COLOR,
    ENTITY_EVENT,
    Event,
    User,
)
from event_planner.domain.errors import InvalidInputError
from event_planner.infrastructure.repositories import EventRepository
from event_planner.utils import ensure_app_timezone, now_in_app_timezone

from ..activity_logs import log_activity


def ensure_valid_schedule(start_at: datetime | None, end_at: datetime | None) -> None:
    """Reject schedules that end before they start."""

    start = ensure_app_timezone(start_at)
    end = ensure_app_timezone(end_at)
    if start is not None and end is not None and end < start:
        raise InvalidInputError(
            "INVALID_SCHEDULE",
            "The end date must not be earlier than the start date",
        )


def create_event(
    session: Session,
    *,
    owner: User,
    title: str,
    description: str | None = None,
    location: str | None = None,
    cover_image_uri: str | None = None,
    color: int | None = None,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
) -> Event:
    """Create an event owned by ``owner``; the owner becomes its first member."""

    ensure_valid_schedule(start_at, end_at)

    entity = Event(
        id=None,
        owner_id=owner.id,
        title=title,
        description=description,
        location=location,
        cover_image_uri=cover_image_uri,
        color=color if color is not None else DEFAULT_EVENT_COLOR,
        start_at=start_at,
        end_at=end_at,
        created_at=now_in_app_timezone(),
        updated_at=None,
    )
    event = EventRepository(session).create(entity)

    log_activity(
        session,
        user_id=owner.id,
        event_id=event.id,
        action_type=ACTION_CREATE_EVENT,
        entity_type=ENTITY_EVENT,
        entity_title=event.title,
    )
    return event
