"""Validation helpers shared by the task and subtask use cases."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from event_planner.domain.entities import TASK_PRIORITIES, TASK_STATUSES
from event_planner.domain.errors import InvalidInputError
from event_planner.infrastructure.repositories import UserRepository


def ensure_status(status: str) -> str:
    if status not in TASK_STATUSES:
        raise InvalidInputError(
            "INVALID_STATUS",
            f"Unknown status '{status}'",
            hint=f"Use one of: {', '.join(TASK_STATUSES)}.",
        )
    return status


def ensure_priority(priority: str) -> str:
    if priority not in TASK_PRIORITIES:
        raise InvalidInputError(
            "INVALID_PRIORITY",
            f"Unknown priority '{priority}'",
            hint=f"Use one of: {', '.join(TASK_PRIORITIES)}.",
        )
    return priority


def ensure_assignees_exist(session: Session, assignee_ids: Sequence[int]) -> list[int]:
    """Return the de-duplicated ids, rejecting any that do not exist."""

    unique_ids = list(dict.fromkeys(int(user_id) for user_id in assignee_ids))
    found = UserRepository(session).get_summaries(unique_ids)
    missing = [user_id for user_id in unique_ids if user_id not in found]
    if missing:
        raise InvalidInputError(
            "UNKNOWN_ASSIGNEE",
            f"Unknown assignee ids: {', '.join(str(user_id) for user_id in missing)}",
        )
    return unique_ids
