"""Endpoints for event tasks and personal tasks."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from event_planner.application.use_cases.tasks import (
    TaskFilterOptions,
    create_task as create_task_uc,
    delete_task as delete_task_uc,
    get_task as get_task_uc,
    list_assignee_options as list_assignee_options_uc,
    list_event_tasks as list_event_tasks_uc,
    list_user_tasks as list_user_tasks_uc,
    update_task as update_task_uc,
)
from event_planner.domain.entities import TASK_PRIORITIES, TASK_STATUSES, User
from event_planner.infrastructure.database import get_db
from event_planner.interfaces.api.dependencies import get_current_active_user
from event_planner.interfaces.api.routes_helpers import (
    paginate,
    pick_allowed,
    split_query_values,
)
from event_planner.interfaces.api.schemas import Page, TaskCreate, TaskRead, TaskUpdate

router = APIRouter(tags=["tasks"])


def task_filter_options(
    status_filter: list[str] | None = Query(None, alias="status"),
    priority: list[str] | None = Query(None),
    assignee: list[str] | None = Query(None, description="Username, email or user id"),
    show_completed: bool = Query(True, alias="showCompleted"),
    show_personal_tasks: bool = Query(True, alias="showPersonalTasks"),
    date_from: date | None = Query(None, alias="dateFrom"),
    date_to: date | None = Query(None, alias="dateTo"),
) -> TaskFilterOptions:
    """Build filter options from query parameters; unknown statuses are ignored."""

    return TaskFilterOptions(
        status=tuple(pick_allowed(status_filter, TASK_STATUSES)),
        priority=tuple(pick_allowed(priority, TASK_PRIORITIES)),
        assignees=tuple(split_query_values(assignee)),
        show_completed=show_completed,
        show_personal_tasks=show_personal_tasks,
        date_from=date_from,
        date_to=date_to,
    )


def _page(tasks, page: int, page_size: int) -> Page[TaskRead]:
    items, next_page = paginate(tasks, page, page_size)
    return Page[TaskRead](
        items=[TaskRead.model_validate(task) for task in items], next_page=next_page
    )


@router.get("/events/{event_id}/tasks", response_model=Page[TaskRead])
def list_event_tasks(
    event_id: int,
    q: str | None = Query(None),
    sort: str | None = Query(None, description="'name', 'date' or 'progress'"),
    options: TaskFilterOptions = Depends(task_filter_options),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    tasks = list_event_tasks_uc(
        db,
        event_id=event_id,
        current_user=current_user,
        query=q,
        options=options,
        sort_by=sort,
    )
    return _page(tasks, page, page_size)


@router.post(
    "/events/{event_id}/tasks",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
)
def create_event_task(
    event_id: int,
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    payload = task_in.model_dump(exclude={"event_id"})
    task = create_task_uc(db, current_user=current_user, event_id=event_id, **payload)
    return TaskRead.model_validate(task)


@router.get("/tasks", response_model=Page[TaskRead])
def list_my_tasks(
    q: str | None = Query(None),
    sort: str | None = Query(None, description="'name', 'date' or 'progress'"),
    options: TaskFilterOptions = Depends(task_filter_options),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return personal tasks, tasks of the user's events and tasks assigned to them."""

    tasks = list_user_tasks_uc(
        db, current_user=current_user, query=q, options=options, sort_by=sort
    )
    return _page(tasks, page, page_size)


@router.post("/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Create a personal task, or an event task when ``event_id`` is given."""

    task = create_task_uc(db, current_user=current_user, **task_in.model_dump())
    return TaskRead.model_validate(task)


@router.get("/tasks/assignees", response_model=list[str])
def list_assignee_options(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the labels offered by the assignee filter."""

    return list_assignee_options_uc(db, current_user=current_user)


@router.get("/tasks/{task_id}", response_model=TaskRead)
def read_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return TaskRead.model_validate(get_task_uc(db, task_id, current_user=current_user))


@router.patch("/tasks/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    task_in: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    changes = task_in.model_dump(exclude_unset=True)
    assignee_ids = changes.pop("assignee_ids", None)
    task = update_task_uc(
        db,
        task_id=task_id,
        changes=changes,
        assignee_ids=assignee_ids,
        current_user=current_user,
    )
    return TaskRead.model_validate(task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    delete_task_uc(db, task_id, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
