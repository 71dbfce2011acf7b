"""Use case that aggregates recent activity across events, tasks and memberships."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from event_planner.config import get_settings
from event_planner.domain.entities import (
    ACTIVITY_CATEGORY_EVENT,
    ACTIVITY_CATEGORY_MEMBER,
    ACTIVITY_CATEGORY_TASK,
    MEMBER_ROLE_OWNER,
    ActivityItem,
)
from event_planner.domain.errors import ApiError
from event_planner.infrastructure.models import (
    EventMemberModel,
    EventModel,
    TaskModel,
    UserModel,
)
from event_planner.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)

UNKNOWN_ACTOR = "Unknown"
SYSTEM_ACTOR = "System"
UNTITLED_SUBJECT = "Untitled"

ACTION_CREATED_EVENT = "created event"
ACTION_ADDED_TASK = "added task"
ACTION_JOINED_EVENT = "joined event"


def _safe_datetime(*candidates: datetime | None) -> datetime:
    for candidate in candidates:
        if isinstance(candidate, datetime):
            return ensure_app_timezone(candidate)
    return now_in_app_timezone()


def _actor(user_id: int | None, username: str | None) -> str:
    if user_id is None:
        return SYSTEM_ACTOR
    return username or UNKNOWN_ACTOR


def _subject(title: str | None) -> str:
    return title or UNTITLED_SUBJECT


def get_recent_activity(
    session: Session,
    *,
    per_category: int | None = None,
    limit: int | None = None,
) -> list[ActivityItem]:
    """Return the newest events, tasks and joins merged into one feed.

    Each source is read independently (``per_category`` rows each), mapped to
    :class:`ActivityItem`, then the union is sorted newest first and cut to
    ``limit``. A failure in any source fails the whole call.
    Owner memberships created together with an event are not reported as
    joins.
    """

    settings = get_settings()
    if per_category is None:
        per_category = settings.activity_per_category_limit
    if limit is None:
        limit = settings.activity_feed_limit

    try:
        event_rows = (
            session.query(
                EventModel.id,
                EventModel.title,
                EventModel.created_at,
                EventModel.owner_id,
                UserModel.username,
                UserModel.avatar_url,
            )
            .outerjoin(UserModel, EventModel.owner_id == UserModel.id)
            .order_by(desc(EventModel.created_at), desc(EventModel.id))
            .limit(per_category)
            .all()
        )
        task_rows = (
            session.query(
                TaskModel.id,
                TaskModel.title,
                TaskModel.created_at,
                TaskModel.created_by,
                UserModel.username,
                UserModel.avatar_url,
            )
            .outerjoin(UserModel, TaskModel.created_by == UserModel.id)
            .order_by(desc(TaskModel.created_at), desc(TaskModel.id))
            .limit(per_category)
            .all()
        )
        join_rows = (
            session.query(
                EventMemberModel.id,
                EventMemberModel.joined_at,
                EventMemberModel.user_id,
                EventModel.title.label("event_title"),
                UserModel.username,
                UserModel.avatar_url,
            )
            .outerjoin(EventModel, EventMemberModel.event_id == EventModel.id)
            .outerjoin(UserModel, EventMemberModel.user_id == UserModel.id)
            .filter(EventMemberModel.role != MEMBER_ROLE_OWNER)
            .order_by(desc(EventMemberModel.joined_at), desc(EventMemberModel.id))
            .limit(per_category)
            .all()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to read recent activity sources")
        raise ApiError(
            "FETCH_RECENT_ACTIVITY_FAILED",
            "Recent activity could not be loaded",
            status_code=500,
        ) from exc

    items: list[ActivityItem] = []

    for row in event_rows:
        items.append(
            ActivityItem(
                id=f"event-{row.id}",
                actor=_actor(row.owner_id, row.username),
                action=ACTION_CREATED_EVENT,
                subject=_subject(row.title),
                timestamp=_safe_datetime(row.created_at),
                category=ACTIVITY_CATEGORY_EVENT,
                actor_avatar=row.avatar_url,
            )
        )

    for row in task_rows:
        items.append(
            ActivityItem(
                id=f"task-{row.id}",
                actor=_actor(row.created_by, row.username),
                action=ACTION_ADDED_TASK,
                subject=_subject(row.title),
                timestamp=_safe_datetime(row.created_at),
                category=ACTIVITY_CATEGORY_TASK,
                actor_avatar=row.avatar_url,
            )
        )

    for row in join_rows:
        items.append(
            ActivityItem(
                id=f"member-{row.id}",
                actor=_actor(row.user_id, row.username),
                action=ACTION_JOINED_EVENT,
                subject=_subject(row.event_title),
                timestamp=_safe_datetime(row.joined_at),
                category=ACTIVITY_CATEGORY_MEMBER,
                actor_avatar=row.avatar_url,
            )
        )

    items.sort(key=lambda item: item.timestamp, reverse=True)
    return items[:limit]


__all__ = ["get_recent_activity"]
