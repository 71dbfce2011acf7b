"""Repository implementations for infrastructure layer."""

from .activity_log_repository import ActivityLogRepository
from .event_member_repository import EventMemberRepository
from .event_repository import EventRepository
from .subtask_repository import SubtaskRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityLogRepository",
    "EventMemberRepository",
    "EventRepository",
    "SubtaskRepository",
    "TaskRepository",
    "UserRepository",
]
