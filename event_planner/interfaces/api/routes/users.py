"""Endpoints for looking up users to invite or assign."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from event_planner.application.use_cases.users import (
    get_user as get_user_uc,
    list_users as list_users_uc,
)
from event_planner.domain.entities import User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.schemas import Page, UserRead, UserSummaryRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)


@router.get("", response_model=Page[UserSummaryRead])
def search_users(
    q: str | None = Query(None, description="Matches username or email"),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    users, next_page = list_users_uc(db, query=q, page=page, page_size=page_size)
    return Page[UserSummaryRead](
        items=[UserSummaryRead.model_validate(user) for user in users],
        next_page=next_page,
    )


@router.get("/{user_id}", response_model=UserSummaryRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    return UserSummaryRead.model_validate(get_user_uc(db, user_id))
