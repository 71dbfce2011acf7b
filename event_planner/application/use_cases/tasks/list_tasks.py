"""Use cases for listing tasks of an event or of the current user."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import Task, User
from event_planner.infrastructure.repositories import EventRepository, TaskRepository

from ..access import load_event_for_member
from .filters import TaskFilterOptions, collect_assignees, filter_tasks, sort_tasks


def list_event_tasks(
    session: Session,
    *,
    event_id: int,
    current_user: User,
    query: str | None = None,
    options: TaskFilterOptions | None = None,
    sort_by: str | None = None,
) -> list[Task]:
    """Return the filtered and sorted tasks of an event."""

    load_event_for_member(session, event_id, current_user)
    tasks = TaskRepository(session).list_for_event(event_id)
    return sort_tasks(filter_tasks(tasks, query, options), sort_by)


def list_user_tasks(
    session: Session,
    *,
    current_user: User,
    query: str | None = None,
    options: TaskFilterOptions | None = None,
    sort_by: str | None = None,
) -> list[Task]:
    """Return personal tasks plus tasks of the user's events."""

    tasks = TaskRepository(session).list_visible_to(current_user.id)
    return sort_tasks(filter_tasks(tasks, query, options), sort_by)


def list_assignee_options(session: Session, *, current_user: User) -> list[str]:
    """Return the labels offered by the assignee filter of the task list."""

    tasks = TaskRepository(session).list_visible_to(current_user.id)
    events = EventRepository(session).list_for_user(current_user.id)
    return collect_assignees(tasks, events)
