"""Use case for patching tasks."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from event_planner.domain.entities import ACTION_UPDATE_TASK, ENTITY_TASK, Task, User
from event_planner.infrastructure.realtime import CHANGE_UPDATE, publish_change
from event_planner.infrastructure.repositories import TaskRepository

from ..access import load_task_for_user
from ..activity_logs import log_activity
from ..events.create_event import ensure_valid_schedule
from .validators import ensure_assignees_exist, ensure_priority, ensure_status

_PATCHABLE_FIELDS = frozenset(
    {"title", "description", "status", "priority", "start_at", "end_at"}
)


def update_task(
    session: Session,
    *,
    task_id: int,
    changes: Mapping[str, Any],
    current_user: User,
    assignee_ids: Sequence[int] | None = None,
) -> Task:
    """Apply the provided fields to a task; omitted fields stay unchanged."""

    current = load_task_for_user(session, task_id, current_user)
    patch = {key: value for key, value in changes.items() if key in _PATCHABLE_FIELDS}
    if "status" in patch:
        ensure_status(patch["status"])
    if "priority" in patch:
        ensure_priority(patch["priority"])

    updated = replace(current, **patch)
    ensure_valid_schedule(updated.start_at, updated.end_at)
    assignees = (
        ensure_assignees_exist(session, assignee_ids) if assignee_ids is not None else None
    )
    if not patch and assignees is None:
        return current

    task = TaskRepository(session).update(updated, assignee_ids=assignees)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=task.event_id,
        action_type=ACTION_UPDATE_TASK,
        entity_type=ENTITY_TASK,
        entity_title=task.title,
        metadata={"task_id": task.id, "fields": sorted(patch)},
    )
    publish_change(task.event_id, table="tasks", change=CHANGE_UPDATE, new=task, old=current)
    return task
