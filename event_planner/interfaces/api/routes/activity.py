"""Endpoints providing activity feeds."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from event_planner.application.use_cases import (
    get_event_activities,
    get_personal_activities,
    get_recent_activity,
)
from event_planner.domain.entities import ActivityItem, User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.schemas import ActivityItemRead

router = APIRouter(tags=["activity"])


def _item_to_schema(item: ActivityItem) -> ActivityItemRead:
    return ActivityItemRead.model_validate(item)


@router.get("/activities/recent", response_model=list[ActivityItemRead])
def read_recent_activity(
    limit: int | None = Query(None, ge=1, le=50, description="Maximum number of items"),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[ActivityItemRead]:
    """Return the merged feed of new events, new tasks and membership joins."""

    items = get_recent_activity(db, limit=limit)
    return [_item_to_schema(item) for item in items]


@router.get("/activities/personal", response_model=list[ActivityItemRead])
def read_personal_activity(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[ActivityItemRead]:
    items = get_personal_activities(db, current_user=current_user)
    return [_item_to_schema(item) for item in items]


@router.get("/events/{event_id}/activities", response_model=list[ActivityItemRead])
def read_event_activity(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[ActivityItemRead]:
    items = get_event_activities(db, event_id=event_id, current_user=current_user)
    return [_item_to_schema(item) for item in items]


__all__ = ["router"]
