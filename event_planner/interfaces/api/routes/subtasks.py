"""Endpoints for task checklists."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from event_planner.application.use_cases.subtasks import (
    create_subtask as create_subtask_uc,
    delete_subtask as delete_subtask_uc,
    update_subtask as update_subtask_uc,
)
from event_planner.domain.entities import User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.schemas import SubtaskCreate, SubtaskRead, SubtaskUpdate

router = APIRouter(tags=["subtasks"])


@router.post(
    "/tasks/{task_id}/subtasks",
    response_model=SubtaskRead,
    status_code=status.HTTP_201_CREATED,
)
def create_subtask(
    task_id: int,
    subtask_in: SubtaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    subtask = create_subtask_uc(
        db,
        task_id=task_id,
        title=subtask_in.title,
        status=subtask_in.status,
        current_user=current_user,
    )
    return SubtaskRead.model_validate(subtask)


@router.patch("/subtasks/{subtask_id}", response_model=SubtaskRead)
def update_subtask(
    subtask_id: int,
    subtask_in: SubtaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    subtask = update_subtask_uc(
        db,
        subtask_id=subtask_id,
        current_user=current_user,
        **subtask_in.model_dump(exclude_unset=True),
    )
    return SubtaskRead.model_validate(subtask)


@router.delete("/subtasks/{subtask_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subtask(
    subtask_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    delete_subtask_uc(db, subtask_id, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
