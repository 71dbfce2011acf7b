"""Use case for adding a subtask to a task."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_CREATE_SUBTASK,
    ENTITY_SUBTASK,
    TASK_STATUS_TODO,
    Subtask,
    User,
)
from event_planner.infrastructure.realtime import CHANGE_INSERT, publish_change
from event_planner.infrastructure.repositories import SubtaskRepository

from ..access import load_task_for_user
from ..activity_logs import log_activity
from ..tasks.validators import ensure_status


def create_subtask(
    session: Session,
    *,
    task_id: int,
    title: str,
    current_user: User,
    status: str = TASK_STATUS_TODO,
) -> Subtask:
    """Append a subtask to ``task_id``."""

    task = load_task_for_user(session, task_id, current_user)
    ensure_status(status)

    subtask = SubtaskRepository(session).create(
        Subtask(id=None, task_id=task_id, title=title, status=status, created_at=None)
    )

    log_activity(
        session,
        user_id=current_user.id,
        event_id=task.event_id,
        action_type=ACTION_CREATE_SUBTASK,
        entity_type=ENTITY_SUBTASK,
        entity_title=subtask.title,
        metadata={"task_id": task_id, "subtask_id": subtask.id},
    )
    publish_change(task.event_id, table="subtasks", change=CHANGE_INSERT, new=subtask)
    return subtask
