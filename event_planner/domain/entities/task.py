"""Domain entities for tasks and subtasks."""

from dataclasses import dataclass, field
from datetime import datetime

from .user import UserSummary

TASK_STATUS_TODO = "To Do"
TASK_STATUS_IN_PROGRESS = "In Progress"
TASK_STATUS_DONE = "Done"

TASK_STATUSES: tuple[str, ...] = (
    TASK_STATUS_TODO,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_DONE,
)

TASK_PRIORITY_URGENT = "Urgent"
TASK_PRIORITY_HIGH = "High"
TASK_PRIORITY_NORMAL = "Normal"
TASK_PRIORITY_LOW = "Low"

TASK_PRIORITIES: tuple[str, ...] = (
    TASK_PRIORITY_URGENT,
    TASK_PRIORITY_HIGH,
    TASK_PRIORITY_NORMAL,
    TASK_PRIORITY_LOW,
)


@dataclass
class Subtask:
    """A checklist item belonging to a task."""

    id: int | None
    task_id: int
    title: str
    status: str
    created_at: datetime | None


@dataclass
class Task:
    """A unit of work, either attached to an event or personal."""

    id: int | None
    event_id: int | None
    title: str
    description: str | None
    status: str
    priority: str
    start_at: datetime | None
    end_at: datetime | None
    created_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    event_title: str | None = None
    assignees: list[UserSummary] = field(default_factory=list)
    subtasks: list[Subtask] = field(default_factory=list)

    def is_personal(self) -> bool:
        """A task without an event is personal to its creator."""

        return self.event_id is None


__all__ = [
    "Subtask",
    "Task",
    "TASK_PRIORITIES",
    "TASK_PRIORITY_HIGH",
    "TASK_PRIORITY_LOW",
    "TASK_PRIORITY_NORMAL",
    "TASK_PRIORITY_URGENT",
    "TASK_STATUSES",
    "TASK_STATUS_DONE",
    "TASK_STATUS_IN_PROGRESS",
    "TASK_STATUS_TODO",
]
