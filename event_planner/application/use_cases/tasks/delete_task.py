"""Use case for deleting tasks."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import ACTION_DELETE_TASK, ENTITY_TASK, User
from event_planner.infrastructure.realtime import CHANGE_DELETE, publish_change
from event_planner.infrastructure.repositories import TaskRepository

from ..access import load_task_for_user
from ..activity_logs import log_activity


def delete_task(session: Session, task_id: int, *, current_user: User) -> None:
    """Delete a task together with its subtasks."""

    task = load_task_for_user(session, task_id, current_user)
    TaskRepository(session).delete(task_id)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=task.event_id,
        action_type=ACTION_DELETE_TASK,
        entity_type=ENTITY_TASK,
        entity_title=task.title,
        metadata={"task_id": task_id},
    )
    publish_change(task.event_id, table="tasks", change=CHANGE_DELETE, old=task)
