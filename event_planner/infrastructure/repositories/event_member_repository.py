"""Persistence layer for event membership."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from event_planner.domain.entities import EventMember
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import EventMemberModel
from event_planner.utils import ensure_app_timezone


class EventMemberRepository:
    """Add, list and remove the users that belong to an event."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, event_id: int) -> Sequence[EventMember]:
        with translate_database_errors("MEMBERS_LIST_FAILED", self.session):
            models = (
                self.session.query(EventMemberModel)
                .filter(EventMemberModel.event_id == event_id)
                .order_by(EventMemberModel.joined_at.asc(), EventMemberModel.id.asc())
                .all()
            )
        return [self.to_entity(model) for model in models]

    def get(self, event_id: int, user_id: int) -> EventMember | None:
        with translate_database_errors("MEMBERS_LIST_FAILED", self.session):
            model = self._get_model(event_id, user_id)
        return self.to_entity(model) if model else None

    def add(self, event_id: int, user_id: int, role: str) -> EventMember:
        model = EventMemberModel(event_id=event_id, user_id=user_id, role=role)
        with translate_database_errors("MEMBER_INVITE_FAILED", self.session):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.to_entity(model)

    def remove(self, event_id: int, user_id: int) -> bool:
        """Delete the membership and report whether one existed."""

        with translate_database_errors("MEMBER_REMOVE_FAILED", self.session):
            model = self._get_model(event_id, user_id)
            if model is None:
                return False
            self.session.delete(model)
            self.session.commit()
        return True

    def _get_model(self, event_id: int, user_id: int) -> EventMemberModel | None:
        return (
            self.session.query(EventMemberModel)
            .filter(EventMemberModel.event_id == event_id)
            .filter(EventMemberModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def to_entity(model: EventMemberModel) -> EventMember:
        user = model.user
        return EventMember(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            role=model.role,
            joined_at=ensure_app_timezone(model.joined_at),
            username=user.username if user is not None else None,
            email=user.email if user is not None else None,
        )


__all__ = ["EventMemberRepository"]
