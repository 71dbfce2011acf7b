"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from event_planner.domain.entities import User, UserSummary
from event_planner.infrastructure.database import translate_database_errors
from event_planner.infrastructure.models import UserModel
from event_planner.utils import ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self, *, query: str | None = None, skip: int = 0, limit: int | None = 20
    ) -> tuple[Sequence[User], int]:
        """Return a page of active users matching ``query`` and the total count."""

        with translate_database_errors("USERS_LIST_FAILED", self.session):
            base = self.session.query(UserModel).filter(UserModel.is_active.is_(True))
            if query:
                pattern = f"%{query.lower()}%"
                base = base.filter(
                    or_(
                        func.lower(UserModel.username).like(pattern),
                        func.lower(UserModel.email).like(pattern),
                    )
                )
            total = base.count()
            base = base.order_by(UserModel.username.asc())
            if skip:
                base = base.offset(skip)
            if limit is not None:
                base = base.limit(limit)
            return [self._to_entity(model) for model in base.all()], total

    def get(self, user_id: int) -> User | None:
        with translate_database_errors("GET_USER_FAILED", self.session):
            model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        with translate_database_errors("GET_USER_FAILED", self.session):
            model = (
                self.session.query(UserModel)
                .filter(func.lower(UserModel.email) == email.lower())
                .first()
            )
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        with translate_database_errors("GET_USER_FAILED", self.session):
            model = self._get_model(username=username)
        return self._to_entity(model) if model else None

    def get_summaries(self, user_ids: Sequence[int]) -> dict[int, UserSummary]:
        """Return summaries for the existing users among ``user_ids``."""

        if not user_ids:
            return {}
        unique_ids = {int(user_id) for user_id in user_ids}
        with translate_database_errors("GET_USER_FAILED", self.session):
            models = (
                self.session.query(UserModel).filter(UserModel.id.in_(unique_ids)).all()
            )
        return {model.id: self.to_summary(model) for model in models}

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        with translate_database_errors("USER_CREATE_FAILED", self.session):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def to_summary(model: UserModel) -> UserSummary:
        return UserSummary(
            id=model.id,
            username=model.username,
            email=model.email,
            avatar_url=model.avatar_url,
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password,
            avatar_url=model.avatar_url,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )

    def _get_model(self, **filters) -> UserModel | None:
        return self.session.query(UserModel).filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.avatar_url = user.avatar_url
        model.is_active = user.is_active
        if user.created_at is not None:
            model.created_at = ensure_app_timezone(user.created_at)


__all__ = ["UserRepository"]
