"""Use case for patching a subtask."""

from dataclasses import replace

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_UPDATE_SUBTASK,
    ENTITY_SUBTASK,
    Subtask,
    User,
)
from event_planner.infrastructure.realtime import CHANGE_UPDATE, publish_change
from event_planner.infrastructure.repositories import SubtaskRepository

from ..access import load_subtask_for_user
from ..activity_logs import log_activity
from ..tasks.validators import ensure_status


def update_subtask(
    session: Session,
    *,
    subtask_id: int,
    current_user: User,
    title: str | None = None,
    status: str | None = None,
) -> Subtask:
    """Rename a subtask and/or change its status."""

    current, task = load_subtask_for_user(session, subtask_id, current_user)
    if status is not None:
        ensure_status(status)
    if title is None and status is None:
        return current

    updated = replace(
        current,
        title=title if title is not None else current.title,
        status=status if status is not None else current.status,
    )
    subtask = SubtaskRepository(session).update(updated)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=task.event_id,
        action_type=ACTION_UPDATE_SUBTASK,
        entity_type=ENTITY_SUBTASK,
        entity_title=subtask.title,
        metadata={"task_id": task.id, "subtask_id": subtask.id},
    )
    publish_change(
        task.event_id, table="subtasks", change=CHANGE_UPDATE, new=subtask, old=current
    )
    return subtask
