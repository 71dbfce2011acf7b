"""Tests for the event filter and sort helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from event_planner.application.use_cases.events import (
    EventDateFilters,
    filter_events,
    sort_events,
)
from event_planner.domain.entities import Event

NOW = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)


def _event(
    event_id: int,
    title: str,
    *,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
    description: str | None = None,
    location: str | None = None,
) -> Event:
    return Event(
        id=event_id,
        owner_id=1,
        title=title,
        description=description,
        location=location,
        cover_image_uri=None,
        color=1,
        start_at=start_at,
        end_at=end_at,
        created_at=None,
        updated_at=None,
    )


EVENTS = [
    _event(1, "Finished fair", start_at=NOW - timedelta(days=40), end_at=NOW - timedelta(days=39)),
    _event(2, "Study group", start_at=NOW - timedelta(days=2), end_at=NOW + timedelta(hours=1)),
    _event(3, "Movie night", start_at=NOW - timedelta(days=20), location="Main Hall"),
    _event(4, "Graduation", start_at=NOW + timedelta(days=30), description="Caps and gowns"),
    _event(5, "Someday"),
]


def _ids(events) -> list[int]:
    return [event.id for event in events]


@pytest.mark.parametrize(
    "filters",
    [
        EventDateFilters(),
        EventDateFilters(past=True, this_week=True, this_month=True, upcoming=True),
    ],
)
def test_no_window_or_every_window_lets_everything_through(filters) -> None:
    assert _ids(filter_events(EVENTS, "", filters, now=NOW)) == [1, 2, 3, 4, 5]


def test_text_query_searches_title_description_and_location() -> None:
    assert _ids(filter_events(EVENTS, "  hall ", now=NOW)) == [3]
    assert _ids(filter_events(EVENTS, "GOWNS", now=NOW)) == [4]


def test_single_windows() -> None:
    assert _ids(filter_events(EVENTS, "", EventDateFilters(past=True), now=NOW)) == [1]
    assert _ids(filter_events(EVENTS, "", EventDateFilters(upcoming=True), now=NOW)) == [4]
    assert _ids(filter_events(EVENTS, "", EventDateFilters(this_week=True), now=NOW)) == [2]
    assert _ids(filter_events(EVENTS, "", EventDateFilters(this_month=True), now=NOW)) == [2, 3]


def test_windows_combine_as_a_union() -> None:
    filters = EventDateFilters(past=True, upcoming=True)

    assert _ids(filter_events(EVENTS, "", filters, now=NOW)) == [1, 4]


def test_this_month_clamps_to_the_last_day_of_the_previous_month() -> None:
    # 31 March looks back to 29 February in a leap year.
    events = [
        _event(1, "Leap day", start_at=datetime(2024, 2, 29, 0, 0, tzinfo=timezone.utc)),
        _event(2, "Too early", start_at=datetime(2024, 2, 28, 23, 59, tzinfo=timezone.utc)),
    ]

    assert _ids(filter_events(events, "", EventDateFilters(this_month=True), now=NOW)) == [1]


def test_sort_events_by_name_and_date() -> None:
    assert [event.title for event in sort_events(EVENTS, "name")] == sorted(
        event.title for event in EVENTS
    )
    assert _ids(sort_events(EVENTS, "date")) == [1, 3, 2, 4, 5]
    assert sort_events(EVENTS, "unknown") == EVENTS
