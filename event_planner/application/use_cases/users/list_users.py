"""Use case for searching users to invite or assign."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from event_planner.domain.entities import User
from event_planner.infrastructure.repositories import UserRepository


def list_users(
    session: Session, *, query: str | None = None, page: int = 1, page_size: int = 20
) -> tuple[Sequence[User], int | None]:
    """Return one page of users and the number of the next page, if any."""

    skip = (page - 1) * page_size
    users, total = UserRepository(session).list(query=query, skip=skip, limit=page_size)
    next_page = page + 1 if skip + len(users) < total else None
    return users, next_page
