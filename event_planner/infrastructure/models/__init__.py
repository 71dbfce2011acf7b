"""ORM models used by the application infrastructure."""

from .activity_log import ActivityLogModel
from .event import EventMemberModel, EventModel
from .task import SubtaskModel, TaskModel, task_assignee_table
from .user import UserModel

__all__ = [
    "ActivityLogModel",
    "EventMemberModel",
    "EventModel",
    "SubtaskModel",
    "TaskModel",
    "task_assignee_table",
    "UserModel",
]
