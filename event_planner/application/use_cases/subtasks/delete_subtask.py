"""Use case for deleting a subtask."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import ACTION_DELETE_SUBTASK, ENTITY_SUBTASK, User
from event_planner.infrastructure.realtime import CHANGE_DELETE, publish_change
from event_planner.infrastructure.repositories import SubtaskRepository

from ..access import load_subtask_for_user
from ..activity_logs import log_activity


def delete_subtask(session: Session, subtask_id: int, *, current_user: User) -> None:
    subtask, task = load_subtask_for_user(session, subtask_id, current_user)
    SubtaskRepository(session).delete(subtask_id)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=task.event_id,
        action_type=ACTION_DELETE_SUBTASK,
        entity_type=ENTITY_SUBTASK,
        entity_title=subtask.title,
        metadata={"task_id": task.id, "subtask_id": subtask_id},
    )
    publish_change(task.event_id, table="subtasks", change=CHANGE_DELETE, old=subtask)
