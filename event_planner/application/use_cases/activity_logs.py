"""Use cases for recording and reading the per-user activity log."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_CREATE_EVENT,
    ACTION_CREATE_SUBTASK,
    ACTION_CREATE_TASK,
    ACTION_DELETE_SUBTASK,
    ACTION_DELETE_TASK,
    ACTION_JOIN_EVENT,
    ACTION_UPDATE_EVENT,
    ACTION_UPDATE_SUBTASK,
    ACTION_UPDATE_TASK,
    ACTIVITY_CATEGORY_EVENT,
    ACTIVITY_CATEGORY_MEMBER,
    ACTIVITY_CATEGORY_TASK,
    ActivityItem,
    ActivityLog,
    User,
)
from event_planner.domain.errors import ApiError
from event_planner.infrastructure.repositories import ActivityLogRepository

from .access import load_event_for_member

logger = logging.getLogger(__name__)

EVENT_ACTIVITY_LIMIT = 5
PERSONAL_ACTIVITY_LIMIT = 10

_EVENT_ACTION_LABELS: dict[str, str] = {
    ACTION_CREATE_TASK: "created task",
    ACTION_UPDATE_TASK: "updated task",
    ACTION_DELETE_TASK: "deleted task",
    ACTION_JOIN_EVENT: "joined event",
    ACTION_CREATE_EVENT: "created event",
    ACTION_UPDATE_EVENT: "updated event details",
    ACTION_CREATE_SUBTASK: "added subtask",
    ACTION_UPDATE_SUBTASK: "updated subtask",
    ACTION_DELETE_SUBTASK: "deleted subtask",
}

_PERSONAL_ACTION_LABELS: dict[str, str] = {
    ACTION_CREATE_TASK: "created personal task",
    ACTION_UPDATE_TASK: "updated personal task",
    ACTION_DELETE_TASK: "deleted personal task",
    ACTION_CREATE_SUBTASK: "added subtask to personal task",
    ACTION_UPDATE_SUBTASK: "updated subtask",
    ACTION_DELETE_SUBTASK: "deleted subtask",
}

_ACTION_CATEGORIES: dict[str, str] = {
    ACTION_CREATE_TASK: ACTIVITY_CATEGORY_TASK,
    ACTION_UPDATE_TASK: ACTIVITY_CATEGORY_TASK,
    ACTION_DELETE_TASK: ACTIVITY_CATEGORY_TASK,
    ACTION_CREATE_SUBTASK: ACTIVITY_CATEGORY_TASK,
    ACTION_UPDATE_SUBTASK: ACTIVITY_CATEGORY_TASK,
    ACTION_DELETE_SUBTASK: ACTIVITY_CATEGORY_TASK,
    ACTION_CREATE_EVENT: ACTIVITY_CATEGORY_EVENT,
    ACTION_UPDATE_EVENT: ACTIVITY_CATEGORY_EVENT,
    ACTION_JOIN_EVENT: ACTIVITY_CATEGORY_MEMBER,
}

_DEFAULT_ACTION_LABEL = "performed action"


def log_activity(
    session: Session,
    *,
    user_id: int | None,
    action_type: str,
    entity_type: str,
    entity_title: str,
    event_id: int | None = None,
    metadata: dict[str, Any] | None = None,
) -> None:
    """Record an action without ever failing the caller's operation."""

    try:
        ActivityLogRepository(session).add(
            ActivityLog(
                id=None,
                user_id=user_id,
                event_id=event_id,
                action_type=action_type,
                entity_type=entity_type,
                entity_title=entity_title,
                created_at=None,
                metadata=metadata or {},
            )
        )
    except ApiError as exc:
        logger.warning("Failed to log activity %s for user %s: %s", action_type, user_id, exc)


def get_event_activities(
    session: Session, *, event_id: int, current_user: User
) -> list[ActivityItem]:
    """Return the most recent actions recorded for an event."""

    load_event_for_member(session, event_id, current_user)
    logs = ActivityLogRepository(session).list_for_event(event_id, limit=EVENT_ACTIVITY_LIMIT)
    return [_to_item(log, _EVENT_ACTION_LABELS) for log in logs]


def get_personal_activities(session: Session, *, current_user: User) -> list[ActivityItem]:
    """Return the current user's recent actions on personal tasks."""

    logs = ActivityLogRepository(session).list_personal(
        current_user.id, limit=PERSONAL_ACTIVITY_LIMIT
    )
    return [_to_item(log, _PERSONAL_ACTION_LABELS) for log in logs]


def _to_item(log: ActivityLog, labels: dict[str, str]) -> ActivityItem:
    return ActivityItem(
        id=f"log-{log.id}",
        actor=log.username or "Unknown",
        action=labels.get(log.action_type, _DEFAULT_ACTION_LABEL),
        subject=log.entity_title,
        timestamp=log.created_at,
        category=_ACTION_CATEGORIES.get(log.action_type, ACTIVITY_CATEGORY_EVENT),
        actor_avatar=log.avatar_url,
    )


__all__ = ["get_event_activities", "get_personal_activities", "log_activity"]
