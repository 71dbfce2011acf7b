"""Persistence layer for events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, or_, select
from sqlalchemy.orm import Session, selectinload

from event_planner.domain.entities import MEMBER_ROLE_OWNER, Event
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import EventMemberModel, EventModel
from event_planner.utils import ensure_app_timezone

from .event_member_repository import EventMemberRepository


class EventRepository:
    """Provide CRUD operations for events."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[Event]:
        """Return events owned by or shared with ``user_id``, newest first."""

        membership = select(EventMemberModel.event_id).where(
            EventMemberModel.user_id == user_id
        )
        with translate_database_errors("EVENTS_LIST_FAILED", self.session):
            models = (
                self.session.query(EventModel)
                .options(selectinload(EventModel.members))
                .filter(
                    or_(EventModel.owner_id == user_id, EventModel.id.in_(membership))
                )
                .order_by(desc(EventModel.created_at), desc(EventModel.id))
                .all()
            )
        return [self._to_entity(model) for model in models]

    def get(self, event_id: int) -> Event | None:
        with translate_database_errors("EVENT_GET_FAILED", self.session):
            model = self._get_model(event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        """Persist ``event`` and register its owner as the first member."""

        model = EventModel()
        self._apply_entity_to_model(model, event)
        if event.owner_id is not None:
            model.members.append(
                EventMemberModel(user_id=event.owner_id, role=MEMBER_ROLE_OWNER)
            )
        with translate_database_errors("EVENT_CREATE_FAILED", self.session):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        with translate_database_errors("EVENT_UPDATE_FAILED", self.session):
            model = self._get_model(event.id)
            if model is None:
                msg = f"Event with id {event.id} not found"
                raise ValueError(msg)
            self._apply_entity_to_model(model, event)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: int) -> None:
        with translate_database_errors("EVENT_DELETE_FAILED", self.session):
            model = self._get_model(event_id)
            if model is None:
                return
            self.session.delete(model)
            self.session.commit()

    def _get_model(self, event_id: int | None) -> EventModel | None:
        return (
            self.session.query(EventModel)
            .options(selectinload(EventModel.members))
            .filter(EventModel.id == event_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            description=model.description,
            location=model.location,
            cover_image_uri=model.cover_image_uri,
            color=model.color,
            start_at=ensure_app_timezone(model.start_at),
            end_at=ensure_app_timezone(model.end_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            members=[EventMemberRepository.to_entity(member) for member in model.members],
        )

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.owner_id = event.owner_id
        model.title = event.title
        model.description = event.description
        model.location = event.location
        model.cover_image_uri = event.cover_image_uri
        model.color = event.color
        model.start_at = ensure_app_timezone(event.start_at)
        model.end_at = ensure_app_timezone(event.end_at)
        if event.created_at is not None:
            model.created_at = ensure_app_timezone(event.created_at)


__all__ = ["EventRepository"]
