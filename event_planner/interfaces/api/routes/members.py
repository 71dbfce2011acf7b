"""Endpoints for managing event membership."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from event_planner.application.use_cases.members import (
    invite_member as invite_member_uc,
    list_members as list_members_uc,
    remove_member as remove_member_uc,
)
from event_planner.domain.entities import User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.schemas import EventMemberCreate, EventMemberRead

router = APIRouter(prefix="/events/{event_id}/members", tags=["members"])


@router.get("", response_model=list[EventMemberRead])
def list_members(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    members = list_members_uc(db, event_id, current_user=current_user)
    return [EventMemberRead.model_validate(member) for member in members]


@router.post("", response_model=EventMemberRead, status_code=status.HTTP_201_CREATED)
def invite_member(
    event_id: int,
    member_in: EventMemberCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Add a user to the event; only the owner may invite."""

    member = invite_member_uc(
        db,
        event_id=event_id,
        user_id=member_in.user_id,
        role=member_in.role,
        current_user=current_user,
    )
    return EventMemberRead.model_validate(member)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_member(
    event_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Remove a member; members may also remove themselves."""

    remove_member_uc(db, event_id=event_id, user_id=user_id, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
