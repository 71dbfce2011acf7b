"""Tests for the task filter and sort helpers."""

from datetime import date, datetime, timezone

from event_planner.application.use_cases.tasks import (
    TaskFilterOptions,
    collect_assignees,
    filter_tasks,
    sort_tasks,
)
from event_planner.domain.entities import Event, EventMember, Task, UserSummary


def _task(
    task_id: int,
    title: str,
    *,
    status: str = "To Do",
    priority: str = "Normal",
    event_id: int | None = 1,
    description: str | None = None,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
    assignees: list[UserSummary] | None = None,
) -> Task:
    return Task(
        id=task_id,
        event_id=event_id,
        title=title,
        description=description,
        status=status,
        priority=priority,
        start_at=start_at,
        end_at=end_at,
        created_by=1,
        created_at=None,
        updated_at=None,
        assignees=assignees or [],
    )


def _utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


ALICE = UserSummary(id=1, username="alice", email="alice@example.com")
BOB = UserSummary(id=2, username="", email="bob@example.com")

TASKS = [
    _task(1, "Book venue", status="Done", priority="High", assignees=[ALICE]),
    _task(2, "Buy snacks", description="Chips and VENUE drinks", event_id=None),
    _task(3, "Print flyers", status="In Progress", priority="Urgent", assignees=[BOB]),
    _task(4, "Clean up", priority="Low", event_id=None),
]


def test_default_options_return_every_task_in_order() -> None:
    result = filter_tasks(TASKS, "", TaskFilterOptions())

    assert [task.id for task in result] == [1, 2, 3, 4]
    assert filter_tasks(TASKS, None) == TASKS


def test_filter_does_not_mutate_input() -> None:
    tasks = list(TASKS)
    filter_tasks(tasks, "venue", TaskFilterOptions(show_completed=False))
    sort_tasks(tasks, "name")

    assert tasks == TASKS


def test_text_query_matches_title_or_description_case_insensitively() -> None:
    result = filter_tasks(TASKS, "VeNuE")

    assert [task.id for task in result] == [1, 2]


def test_status_and_priority_filters() -> None:
    by_status = filter_tasks(TASKS, "", TaskFilterOptions(status=("To Do", "In Progress")))
    by_priority = filter_tasks(TASKS, "", TaskFilterOptions(priority=("Urgent", "High")))

    assert [task.id for task in by_status] == [2, 3, 4]
    assert [task.id for task in by_priority] == [1, 3]


def test_hide_completed_tasks() -> None:
    result = filter_tasks(TASKS, "", TaskFilterOptions(show_completed=False))

    assert result
    assert all(task.status != "Done" for task in result)


def test_hide_personal_tasks() -> None:
    result = filter_tasks(TASKS, "", TaskFilterOptions(show_personal_tasks=False))

    assert [task.id for task in result] == [1, 3]
    assert all(task.event_id is not None for task in result)


def test_assignee_filter_accepts_username_email_or_id() -> None:
    assert [t.id for t in filter_tasks(TASKS, "", TaskFilterOptions(assignees=("alice",)))] == [1]
    assert [
        t.id for t in filter_tasks(TASKS, "", TaskFilterOptions(assignees=("bob@example.com",)))
    ] == [3]
    assert [t.id for t in filter_tasks(TASKS, "", TaskFilterOptions(assignees=("2",)))] == [3]


def test_date_range_keeps_overlapping_tasks_only() -> None:
    tasks = [
        _task(1, "Inside", start_at=_utc(2024, 5, 10, 9), end_at=_utc(2024, 5, 10, 17)),
        _task(2, "Spanning", start_at=_utc(2024, 5, 1), end_at=_utc(2024, 5, 31)),
        _task(3, "Before", end_at=_utc(2024, 5, 9, 23, 59)),
        _task(4, "Undated"),
        _task(5, "Last day", start_at=_utc(2024, 5, 11, 23, 30)),
    ]
    options = TaskFilterOptions(date_from=date(2024, 5, 10), date_to=date(2024, 5, 11))

    assert [task.id for task in filter_tasks(tasks, "", options)] == [1, 2, 5]


def test_sort_by_name_is_non_decreasing() -> None:
    titles = [task.title for task in sort_tasks(TASKS, "name")]

    assert titles == sorted(titles)


def test_sort_by_date_puts_undated_last() -> None:
    tasks = [
        _task(1, "No date"),
        _task(2, "Later", end_at=_utc(2024, 6, 2)),
        _task(3, "Sooner", end_at=_utc(2024, 6, 1)),
        _task(4, "Also no date"),
    ]

    assert [task.id for task in sort_tasks(tasks, "date")] == [3, 2, 1, 4]


def test_sort_by_progress_orders_by_status_rank() -> None:
    tasks = TASKS + [_task(5, "Mystery", status="Blocked")]

    assert [task.status for task in sort_tasks(tasks, "progress")] == [
        "To Do",
        "To Do",
        "In Progress",
        "Done",
        "Blocked",
    ]


def test_unknown_sort_key_returns_a_copy() -> None:
    result = sort_tasks(TASKS, "colour")

    assert result == TASKS
    assert result is not TASKS


def test_collect_assignees_merges_labels_and_member_ids() -> None:
    event = Event(
        id=1,
        owner_id=1,
        title="Hackathon",
        description=None,
        location=None,
        cover_image_uri=None,
        color=1,
        start_at=None,
        end_at=None,
        created_at=None,
        updated_at=None,
        members=[
            EventMember(id=1, event_id=1, user_id=7, role="owner", joined_at=None),
        ],
    )

    assert collect_assignees(TASKS, [event]) == ["7", "alice", "bob@example.com"]
