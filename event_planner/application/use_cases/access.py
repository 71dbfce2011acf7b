"""Shared authorization checks for event, task and subtask use cases."""

from __future__ import annotations

from sqlalchemy.orm import Session

from event_planner.domain.entities import Event, Subtask, Task, User
from event_planner.domain.errors import NotFoundError, PermissionDeniedError
from event_planner.infrastructure.repositories import (
    EventRepository,
    SubtaskRepository,
    TaskRepository,
)


def load_event_for_member(session: Session, event_id: int, user: User) -> Event:
    """Return the event when ``user`` owns it or belongs to it."""

    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("EVENT_NOT_FOUND", f"Event {event_id} does not exist")
    if not event.has_member(user.id):
        raise PermissionDeniedError(
            "EVENT_FORBIDDEN",
            "You are not a member of this event",
            hint="Ask the event owner for an invitation.",
        )
    return event


def load_event_for_owner(session: Session, event_id: int, user: User) -> Event:
    """Return the event when ``user`` owns it."""

    event = load_event_for_member(session, event_id, user)
    if not event.is_owner(user.id):
        raise PermissionDeniedError(
            "EVENT_OWNER_REQUIRED", "Only the event owner can perform this action"
        )
    return event


def can_access_task(session: Session, task: Task, user: User) -> bool:
    if any(assignee.id == user.id for assignee in task.assignees):
        return True
    if task.event_id is None:
        return task.created_by == user.id
    event = EventRepository(session).get(task.event_id)
    return event is not None and event.has_member(user.id)


def load_task_for_user(session: Session, task_id: int, user: User) -> Task:
    """Return the task when ``user`` may read and modify it."""

    task = TaskRepository(session).get(task_id)
    if task is None:
        raise NotFoundError("TASK_NOT_FOUND", f"Task {task_id} does not exist")
    if not can_access_task(session, task, user):
        raise PermissionDeniedError("TASK_FORBIDDEN", "You cannot access this task")
    return task


def load_subtask_for_user(session: Session, subtask_id: int, user: User) -> tuple[Subtask, Task]:
    """Return the subtask together with its parent task."""

    subtask = SubtaskRepository(session).get(subtask_id)
    if subtask is None:
        raise NotFoundError("SUBTASK_NOT_FOUND", f"Subtask {subtask_id} does not exist")
    task = load_task_for_user(session, subtask.task_id, user)
    return subtask, task


__all__ = [
    "can_access_task",
    "load_event_for_member",
    "load_event_for_owner",
    "load_subtask_for_user",
    "load_task_for_user",
]
