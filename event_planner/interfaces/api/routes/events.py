"""Endpoints for creating, browsing and editing events."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from event_planner.application.use_cases.events import (
    EventDateFilters,
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_events as list_events_uc,
    update_event as update_event_uc,
)
from event_planner.domain.entities import User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.routes_helpers import paginate
from event_planner.interfaces.api.schemas import EventCreate, EventRead, EventUpdate, Page

router = APIRouter(prefix="/events", tags=["events"])


def event_date_filters(
    past: bool = Query(False),
    this_week: bool = Query(False, alias="thisWeek"),
    this_month: bool = Query(False, alias="thisMonth"),
    upcoming: bool = Query(False),
) -> EventDateFilters:
    return EventDateFilters(
        past=past, this_week=this_week, this_month=this_month, upcoming=upcoming
    )


@router.get("", response_model=Page[EventRead])
def list_events(
    q: str | None = Query(None, description="Matches title, description or location"),
    sort: str | None = Query(None, description="'name' or 'date'"),
    date_filters: EventDateFilters = Depends(event_date_filters),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the events the user owns or belongs to."""

    events = list_events_uc(
        db, current_user=current_user, query=q, date_filters=date_filters, sort_by=sort
    )
    items, next_page = paginate(events, page, page_size)
    return Page[EventRead](
        items=[EventRead.model_validate(event) for event in items], next_page=next_page
    )


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    event = create_event_uc(db, owner=current_user, **event_in.model_dump())
    return EventRead.model_validate(event)


@router.get("/{event_id}", response_model=EventRead)
def read_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return EventRead.model_validate(get_event_uc(db, event_id, current_user=current_user))


@router.patch("/{event_id}", response_model=EventRead)
def update_event(
    event_id: int,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Apply a partial update; only the owner may edit an event."""

    event = update_event_uc(
        db,
        event_id=event_id,
        changes=event_in.model_dump(exclude_unset=True),
        current_user=current_user,
    )
    return EventRead.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    delete_event_uc(db, event_id, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
