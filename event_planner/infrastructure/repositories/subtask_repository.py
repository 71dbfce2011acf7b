"""Persistence layer for subtasks."""

from __future__ import annotations

from sqlalchemy.orm import Session

from event_planner.domain.entities import Subtask
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import SubtaskModel
from event_planner.utils import ensure_app_timezone


class SubtaskRepository:
    """Provide CRUD operations for subtasks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, subtask_id: int) -> Subtask | None:
        with translate_database_errors("SUBTASK_GET_FAILED", self.session):
            model = self._get_model(subtask_id)
        return self.to_entity(model) if model else None

    def create(self, subtask: Subtask) -> Subtask:
        model = SubtaskModel(
            task_id=subtask.task_id,
            title=subtask.title,
            status=subtask.status,
        )
        with translate_database_errors("SUBTASK_CREATE_FAILED", self.session):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.to_entity(model)

    def update(self, subtask: Subtask) -> Subtask:
        with translate_database_errors("SUBTASK_UPDATE_FAILED", self.session):
            model = self._get_model(subtask.id)
            if model is None:
                msg = f"Subtask with id {subtask.id} not found"
                raise ValueError(msg)
            model.title = subtask.title
            model.status = subtask.status
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.to_entity(model)

    def delete(self, subtask_id: int) -> None:
        with translate_database_errors("SUBTASK_DELETE_FAILED", self.session):
            model = self._get_model(subtask_id)
            if model is None:
                return
            self.session.delete(model)
            self.session.commit()

    def _get_model(self, subtask_id: int | None) -> SubtaskModel | None:
        return (
            self.session.query(SubtaskModel).filter(SubtaskModel.id == subtask_id).first()
        )

    @staticmethod
    def to_entity(model: SubtaskModel) -> Subtask:
        return Subtask(
            id=model.id,
            task_id=model.task_id,
            title=model.title,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SubtaskRepository"]
