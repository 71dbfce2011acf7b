"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import User
from event_planner.domain.errors import NotFoundError
from event_planner.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None or not user.is_active:
        raise NotFoundError("USER_NOT_FOUND", f"User {user_id} does not exist")
    return user
