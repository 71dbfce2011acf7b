"""Pure helpers that narrow and order event collections for list views."""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from event_planner.domain.entities import Event
from event_planner.utils import ensure_app_timezone, now_in_app_timezone, to_sortable_timestamp

SORT_BY_NAME = "name"
SORT_BY_DATE = "date"


@dataclass(frozen=True)
class EventDateFilters:
    """Date windows an event may fall into; several may be combined."""

    past: bool = False
    this_week: bool = False
    this_month: bool = False
    upcoming: bool = False

    def all_inactive(self) -> bool:
        return not (self.past or self.this_week or self.this_month or self.upcoming)

    def all_active(self) -> bool:
        return self.past and self.this_week and self.this_month and self.upcoming


def filter_events(
    events: Iterable[Event],
    query: str | None,
    date_filters: EventDateFilters | None = None,
    *,
    now: datetime | None = None,
) -> list[Event]:
    """Return the events matching ``query`` and the active date windows.

    When no window is selected, or every window is, all events pass the date
    step.
    """

    date_filters = date_filters or EventDateFilters()
    needle = (query or "").strip().lower()
    candidates = [event for event in events if _matches_text(event, needle)]

    if date_filters.all_inactive() or date_filters.all_active():
        return candidates

    reference = ensure_app_timezone(now) or now_in_app_timezone()
    return [
        event
        for event in candidates
        if _matches_window(event, date_filters, reference)
    ]


def sort_events(events: Iterable[Event], sort_by: str | None) -> list[Event]:
    """Return a new list ordered by ``sort_by``; other keys keep the order."""

    ordered = list(events)
    if sort_by == SORT_BY_NAME:
        ordered.sort(key=lambda event: event.title or "")
    elif sort_by == SORT_BY_DATE:
        ordered.sort(key=lambda event: _undated_last(event.start_at))
    return ordered


def _matches_text(event: Event, needle: str) -> bool:
    if not needle:
        return True
    haystacks = (event.title, event.description, event.location)
    return any(needle in (value or "").lower() for value in haystacks)


def _matches_window(event: Event, filters: EventDateFilters, now: datetime) -> bool:
    start = ensure_app_timezone(event.start_at)
    end = ensure_app_timezone(event.end_at)
    one_week_ago = now - timedelta(days=7)
    one_month_ago = _same_day_previous_month(now)

    if filters.past and end is not None and end < now:
        return True
    if filters.upcoming and start is not None and start > now:
        return True
    if filters.this_week and start is not None and one_week_ago <= start <= now:
        return True
    if filters.this_month and start is not None and one_month_ago <= start <= now:
        return True
    return False


def _same_day_previous_month(moment: datetime) -> datetime:
    """Return midnight of the same calendar day one month earlier.

    Days that do not exist in the previous month are clamped to its last day.
    """

    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day, hour=0, minute=0, second=0, microsecond=0)


def _undated_last(value: datetime | None) -> tuple[int, float]:
    timestamp = to_sortable_timestamp(value)
    if timestamp is None:
        return (1, 0.0)
    return (0, timestamp)


__all__ = [
    "EventDateFilters",
    "SORT_BY_DATE",
    "SORT_BY_NAME",
    "filter_events",
    "sort_events",
]
