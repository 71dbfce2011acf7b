"""Use case for retrieving a single task."""

from sqlalchemy.orm import Session

from event_planner.domain.entities import Task, User

from ..access import load_task_for_user


def get_task(session: Session, task_id: int, *, current_user: User) -> Task:
    """Return the task if the current user may see it."""

    return load_task_for_user(session, task_id, current_user)
