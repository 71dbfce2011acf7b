"""Use case for creating event and personal tasks."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from event_planner.domain.entities import (
    ACTION_CREATE_TASK,
    ENTITY_TASK,
    TASK_PRIORITY_NORMAL,
    TASK_STATUS_TODO,
    Task,
    User,
)
from event_planner.infrastructure.realtime import CHANGE_INSERT, publish_change
from event_planner.infrastructure.repositories import TaskRepository
from event_planner.utils import now_in_app_timezone

from ..access import load_event_for_member
from ..activity_logs import log_activity
from ..events.create_event import ensure_valid_schedule
from .validators import ensure_assignees_exist, ensure_priority, ensure_status


def create_task(
    session: Session,
    *,
    current_user: User,
    title: str,
    event_id: int | None = None,
    description: str | None = None,
    status: str = TASK_STATUS_TODO,
    priority: str = TASK_PRIORITY_NORMAL,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
    assignee_ids: Sequence[int] = (),
) -> Task:
    """Create a task in ``event_id``, or a personal task when it is ``None``."""

    if event_id is not None:
        load_event_for_member(session, event_id, current_user)
    ensure_status(status)
    ensure_priority(priority)
    ensure_valid_schedule(start_at, end_at)
    assignees = ensure_assignees_exist(session, assignee_ids)

    entity = Task(
        id=None,
        event_id=event_id,
        title=title,
        description=description,
        status=status,
        priority=priority,
        start_at=start_at,
        end_at=end_at,
        created_by=current_user.id,
        created_at=now_in_app_timezone(),
        updated_at=None,
    )
    task = TaskRepository(session).create(entity, assignee_ids=assignees)

    log_activity(
        session,
        user_id=current_user.id,
        event_id=event_id,
        action_type=ACTION_CREATE_TASK,
        entity_type=ENTITY_TASK,
        entity_title=task.title,
        metadata={"task_id": task.id},
    )
    publish_change(event_id, table="tasks", change=CHANGE_INSERT, new=task)
    return task
