"""Domain entities describing recorded and aggregated activity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

ACTIVITY_CATEGORY_EVENT = "event"
ACTIVITY_CATEGORY_TASK = "task"
ACTIVITY_CATEGORY_MEMBER = "member"

ACTION_CREATE_TASK = "CREATE_TASK"
ACTION_UPDATE_TASK = "UPDATE_TASK"
ACTION_DELETE_TASK = "DELETE_TASK"
ACTION_CREATE_EVENT = "CREATE_EVENT"
ACTION_UPDATE_EVENT = "UPDATE_EVENT"
ACTION_JOIN_EVENT = "JOIN_EVENT"
ACTION_CREATE_SUBTASK = "CREATE_SUBTASK"
ACTION_UPDATE_SUBTASK = "UPDATE_SUBTASK"
ACTION_DELETE_SUBTASK = "DELETE_SUBTASK"

ENTITY_TASK = "TASK"
ENTITY_EVENT = "EVENT"
ENTITY_SUBTASK = "SUBTASK"


@dataclass(frozen=True)
class ActivityItem:
    """Immutable snapshot of one recent action shown in an activity feed."""

    id: str
    actor: str
    action: str
    subject: str
    timestamp: datetime
    category: str
    actor_avatar: str | None = None


@dataclass
class ActivityLog:
    """A persisted record of an action performed by a user."""

    id: int | None
    user_id: int | None
    event_id: int | None
    action_type: str
    entity_type: str
    entity_title: str
    created_at: datetime | None
    metadata: dict[str, Any] = field(default_factory=dict)
    username: str | None = None
    avatar_url: str | None = None


__all__ = [
    "ACTION_CREATE_EVENT",
    "ACTION_CREATE_SUBTASK",
    "ACTION_CREATE_TASK",
    "ACTION_DELETE_SUBTASK",
    "ACTION_DELETE_TASK",
    "ACTION_JOIN_EVENT",
    "ACTION_UPDATE_EVENT",
    "ACTION_UPDATE_SUBTASK",
    "ACTION_UPDATE_TASK",
    "ACTIVITY_CATEGORY_EVENT",
    "ACTIVITY_CATEGORY_MEMBER",
    "ACTIVITY_CATEGORY_TASK",
    "ActivityItem",
    "ActivityLog",
    "ENTITY_EVENT",
    "ENTITY_SUBTASK",
    "ENTITY_TASK",
]
