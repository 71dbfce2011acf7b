"""Persistence layer for the activity log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from event_planner.domain.entities import ActivityLog
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import ActivityLogModel
from event_planner.utils import ensure_app_timezone


class ActivityLogRepository:
    """Append and read recorded user actions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, log: ActivityLog) -> ActivityLog:
        model = ActivityLogModel(
            user_id=log.user_id,
            event_id=log.event_id,
            action_type=log.action_type,
            entity_type=log.entity_type,
            entity_title=log.entity_title,
            details=log.metadata or None,
        )
        with translate_database_errors("ACTIVITY_LOG_FAILED", self.session):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_for_event(self, event_id: int, *, limit: int = 5) -> Sequence[ActivityLog]:
        with translate_database_errors("FETCH_ACTIVITY_FAILED", self.session):
            models = (
                self.session.query(ActivityLogModel)
                .filter(ActivityLogModel.event_id == event_id)
                .order_by(desc(ActivityLogModel.created_at), desc(ActivityLogModel.id))
                .limit(limit)
                .all()
            )
        return [self._to_entity(model) for model in models]

    def list_personal(self, user_id: int, *, limit: int = 10) -> Sequence[ActivityLog]:
        """Return actions of ``user_id`` that are not tied to any event."""

        with translate_database_errors("FETCH_PERSONAL_ACTIVITY_FAILED", self.session):
            models = (
                self.session.query(ActivityLogModel)
                .filter(ActivityLogModel.event_id.is_(None))
                .filter(ActivityLogModel.user_id == user_id)
                .order_by(desc(ActivityLogModel.created_at), desc(ActivityLogModel.id))
                .limit(limit)
                .all()
            )
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityLog:
        user = model.user
        return ActivityLog(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            action_type=model.action_type,
            entity_type=model.entity_type,
            entity_title=model.entity_title,
            created_at=ensure_app_timezone(model.created_at),
            metadata=dict(model.details or {}),
            username=user.username if user is not None else None,
            avatar_url=user.avatar_url if user is not None else None,
        )


__all__ = ["ActivityLogRepository"]
