"""Domain entities exposed by the application."""

from .activity import (
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
    ENTITY_EVENT,
    ENTITY_SUBTASK,
    ENTITY_TASK,
    ActivityItem,
    ActivityLog,
)
from .event import (
    DEFAULT_EVENT_COLOR,
    MEMBER_ROLE_MEMBER,
    MEMBER_ROLE_OWNER,
    Event,
    EventMember,
)
from .task import (
    TASK_PRIORITIES,
    TASK_PRIORITY_NORMAL,
    TASK_STATUSES,
    TASK_STATUS_DONE,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_TODO,
    Subtask,
    Task,
)
from .user import User, UserSummary

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
    "DEFAULT_EVENT_COLOR",
    "ENTITY_EVENT",
    "ENTITY_SUBTASK",
    "ENTITY_TASK",
    "Event",
    "EventMember",
    "MEMBER_ROLE_MEMBER",
    "MEMBER_ROLE_OWNER",
    "Subtask",
    "Task",
    "TASK_PRIORITIES",
    "TASK_PRIORITY_NORMAL",
    "TASK_STATUSES",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_TODO",
    "User",
    "UserSummary",
]
