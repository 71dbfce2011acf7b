"""Pure helpers that narrow and order task collections for list views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from event_planner.domain.entities import (
    TASK_STATUS_DONE,
    TASK_STATUS_IN_PROGRESS,
    TASK_STATUS_TODO,
    Event,
    Task,
)
from event_planner.utils import ensure_app_timezone, get_app_timezone, to_sortable_timestamp

SORT_BY_NAME = "name"
SORT_BY_DATE = "date"
SORT_BY_PROGRESS = "progress"

_STATUS_RANK: dict[str, int] = {
    TASK_STATUS_TODO: 0,
    TASK_STATUS_IN_PROGRESS: 1,
    TASK_STATUS_DONE: 2,
}


@dataclass(frozen=True)
class TaskFilterOptions:
    """Filter set applied to task lists.

    Empty sequences disable the corresponding filter and both toggles default
    to ``True``, so ``TaskFilterOptions()`` keeps every task.
    """

    status: Sequence[str] = ()
    priority: Sequence[str] = ()
    assignees: Sequence[str] = ()
    show_completed: bool = True
    show_personal_tasks: bool = True
    date_from: date | None = None
    date_to: date | None = None


def filter_tasks(
    tasks: Iterable[Task], query: str | None, options: TaskFilterOptions | None = None
) -> list[Task]:
    """Return the tasks that pass every active filter, preserving order."""

    options = options or TaskFilterOptions()
    needle = (query or "").lower()
    window = _day_window(options.date_from, options.date_to)
    return [task for task in tasks if _matches(task, needle, options, window)]


def sort_tasks(tasks: Iterable[Task], sort_by: str | None) -> list[Task]:
    """Return a new list ordered by ``sort_by``; unknown keys keep the order."""

    ordered = list(tasks)
    if sort_by == SORT_BY_NAME:
        ordered.sort(key=lambda task: task.title or "")
    elif sort_by == SORT_BY_DATE:
        ordered.sort(key=lambda task: _undated_last(task.end_at))
    elif sort_by == SORT_BY_PROGRESS:
        ordered.sort(key=lambda task: _STATUS_RANK.get(task.status, len(_STATUS_RANK)))
    return ordered


def collect_assignees(tasks: Iterable[Task], events: Iterable[Event]) -> list[str]:
    """Return the sorted, de-duplicated labels of task assignees and event members."""

    labels: set[str] = set()
    for task in tasks:
        for assignee in task.assignees:
            labels.add(assignee.label())
    for event in events:
        for user_id in event.member_ids():
            labels.add(str(user_id))
    return sorted(labels)


def _matches(
    task: Task,
    needle: str,
    options: TaskFilterOptions,
    window: tuple[datetime, datetime] | None,
) -> bool:
    if needle:
        title_hit = needle in (task.title or "").lower()
        description_hit = needle in (task.description or "").lower()
        if not (title_hit or description_hit):
            return False

    if options.status and task.status not in options.status:
        return False

    if options.priority and task.priority not in options.priority:
        return False

    if options.assignees:
        wanted = set(options.assignees)
        if not any(
            key in wanted for assignee in task.assignees for key in assignee.search_keys()
        ):
            return False

    if window is not None and not _overlaps(task, *window):
        return False

    if not options.show_completed and task.status == TASK_STATUS_DONE:
        return False

    if not options.show_personal_tasks and task.event_id is None:
        return False

    return True


def _day_window(
    date_from: date | None, date_to: date | None
) -> tuple[datetime, datetime] | None:
    """Expand the requested dates into an inclusive ``[start, end]`` range."""

    if date_from is None:
        return None
    tz = get_app_timezone()
    start = datetime.combine(date_from, time.min, tzinfo=tz)
    last_day = date_to or date_from
    end = datetime.combine(last_day, time.min, tzinfo=tz) + timedelta(days=1)
    return start, end - timedelta(microseconds=1)


def _overlaps(task: Task, window_start: datetime, window_end: datetime) -> bool:
    start = ensure_app_timezone(task.start_at)
    end = ensure_app_timezone(task.end_at)
    if start is None and end is None:
        return False
    start = start or end
    end = end or start
    return start <= window_end and end >= window_start


def _undated_last(value: datetime | None) -> tuple[int, float]:
    timestamp = to_sortable_timestamp(value)
    if timestamp is None:
        return (1, 0.0)
    return (0, timestamp)


__all__ = [
    "SORT_BY_DATE",
    "SORT_BY_NAME",
    "SORT_BY_PROGRESS",
    "TaskFilterOptions",
    "collect_assignees",
    "filter_tasks",
    "sort_tasks",
]
