"""Persistence layer for tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, or_, select
from sqlalchemy.orm import Session

from event_planner.domain.entities import Task
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import (
    EventMemberModel,
    EventModel,
    TaskModel,
    UserModel,
    task_assignee_table,
)
from event_planner.utils import ensure_app_timezone

from .subtask_repository import SubtaskRepository
from .user_repository import UserRepository


class TaskRepository:
    """Provide CRUD operations for event and personal tasks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_event(self, event_id: int) -> Sequence[Task]:
        with translate_database_errors("TASKS_LIST_FAILED", self.session):
            models = (
                self.session.query(TaskModel)
                .filter(TaskModel.event_id == event_id)
                .order_by(desc(TaskModel.created_at), desc(TaskModel.id))
                .all()
            )
        return [self._to_entity(model) for model in models]

    def list_visible_to(self, user_id: int) -> Sequence[Task]:
        """Return personal tasks of ``user_id`` plus tasks of its events.

        Tasks assigned to the user are included even when the user no longer
        belongs to the task's event.
        """

        member_events = select(EventMemberModel.event_id).where(
            EventMemberModel.user_id == user_id
        )
        owned_events = select(EventModel.id).where(EventModel.owner_id == user_id)
        assigned = select(task_assignee_table.c.task_id).where(
            task_assignee_table.c.user_id == user_id
        )
        with translate_database_errors("TASKS_LIST_FAILED", self.session):
            models = (
                self.session.query(TaskModel)
                .filter(
                    or_(
                        (TaskModel.event_id.is_(None)) & (TaskModel.created_by == user_id),
                        TaskModel.event_id.in_(member_events),
                        TaskModel.event_id.in_(owned_events),
                        TaskModel.id.in_(assigned),
                    )
                )
                .order_by(desc(TaskModel.created_at), desc(TaskModel.id))
                .all()
            )
        return [self._to_entity(model) for model in models]

    def get(self, task_id: int) -> Task | None:
        with translate_database_errors("TASK_GET_FAILED", self.session):
            model = self._get_model(task_id)
        return self._to_entity(model) if model else None

    def create(self, task: Task, *, assignee_ids: Sequence[int] = ()) -> Task:
        model = TaskModel()
        with translate_database_errors("TASK_CREATE_FAILED", self.session):
            self._apply_entity_to_model(model, task)
            model.assignees = self._load_users(assignee_ids)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task, *, assignee_ids: Sequence[int] | None = None) -> Task:
        """Persist ``task``; assignees are replaced only when ids are given."""

        with translate_database_errors("TASK_UPDATE_FAILED", self.session):
            model = self._get_model(task.id)
            if model is None:
                msg = f"Task with id {task.id} not found"
                raise ValueError(msg)
            self._apply_entity_to_model(model, task)
            if assignee_ids is not None:
                model.assignees = self._load_users(assignee_ids)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: int) -> None:
        with translate_database_errors("TASK_DELETE_FAILED", self.session):
            model = self._get_model(task_id)
            if model is None:
                return
            self.session.delete(model)
            self.session.commit()

    def _load_users(self, user_ids: Sequence[int]) -> list[UserModel]:
        if not user_ids:
            return []
        unique_ids = sorted({int(user_id) for user_id in user_ids})
        return self.session.query(UserModel).filter(UserModel.id.in_(unique_ids)).all()

    def _get_model(self, task_id: int | None) -> TaskModel | None:
        return self.session.query(TaskModel).filter(TaskModel.id == task_id).first()

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            event_id=model.event_id,
            title=model.title,
            description=model.description,
            status=model.status,
            priority=model.priority,
            start_at=ensure_app_timezone(model.start_at),
            end_at=ensure_app_timezone(model.end_at),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            event_title=model.event.title if model.event is not None else None,
            assignees=[UserRepository.to_summary(user) for user in model.assignees],
            subtasks=[SubtaskRepository.to_entity(subtask) for subtask in model.subtasks],
        )

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.event_id = task.event_id
        model.title = task.title
        model.description = task.description
        model.status = task.status
        model.priority = task.priority
        model.start_at = ensure_app_timezone(task.start_at)
        model.end_at = ensure_app_timezone(task.end_at)
        model.created_by = task.created_by
        if task.created_at is not None:
            model.created_at = ensure_app_timezone(task.created_at)


__all__ = ["TaskRepository"]
