"""Use case for registering users."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import User
from event_planner.domain.errors import ConflictError
from event_planner.infrastructure.repositories import UserRepository
from event_planner.infrastructure.security import get_password_hash
from event_planner.utils import now_in_app_timezone


def register_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    avatar_url: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ConflictError("EMAIL_TAKEN", "This email address is already registered")
    if repository.get_by_username(username):
        raise ConflictError(
            "USERNAME_TAKEN",
            "This username is already taken",
            hint="Pick a different username.",
        )

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        avatar_url=avatar_url,
        is_active=True,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
