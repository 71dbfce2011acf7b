"""Use cases for managing tasks."""

from .create_task import create_task
from .delete_task import delete_task
from .filters import (
    TaskFilterOptions,
    collect_assignees,
    filter_tasks,
    sort_tasks,
)
from .get_task import get_task
from .list_tasks import list_assignee_options, list_event_tasks, list_user_tasks
from .update_task import update_task

__all__ = [
    "TaskFilterOptions",
    "collect_assignees",
    "create_task",
    "delete_task",
    "filter_tasks",
    "get_task",
    "list_assignee_options",
    "list_event_tasks",
    "list_user_tasks",
    "sort_tasks",
    "update_task",
]
