"""Tests for the merged recent activity feed."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from event_planner.application.use_cases import get_recent_activity
from event_planner.application.use_cases.activity import _actor, _subject
from event_planner.domain.errors import ApiError
from event_planner.infrastructure.models import (
    EventMemberModel,
    EventModel,
    TaskModel,
    UserModel,
)

BASE_TIME = datetime(2024, 4, 1, 9, 0, tzinfo=timezone.utc)


def _at(minutes: int) -> datetime:
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture()
def seeded(db_session):
    alice = UserModel(username="alice", email="alice@example.com", password="x", is_active=True)
    bob = UserModel(username="bob", email="bob@example.com", password="x", is_active=True)
    db_session.add_all([alice, bob])
    db_session.flush()

    picnic = EventModel(owner_id=alice.id, title="Picnic", color=1, created_at=_at(1))
    concert = EventModel(owner_id=alice.id, title="Concert", color=1, created_at=_at(3))
    db_session.add_all([picnic, concert])
    db_session.flush()

    db_session.add_all(
        [
            EventMemberModel(event_id=picnic.id, user_id=bob.id, role="member", joined_at=_at(2)),
            EventMemberModel(event_id=concert.id, user_id=bob.id, role="member", joined_at=_at(5)),
            TaskModel(
                event_id=picnic.id,
                title="Bring blanket",
                status="To Do",
                priority="Normal",
                created_by=alice.id,
                created_at=_at(4),
            ),
            TaskModel(
                event_id=concert.id,
                title="Reminder",
                status="To Do",
                priority="Normal",
                created_by=None,
                created_at=_at(6),
            ),
        ]
    )
    db_session.commit()
    return db_session


def test_feed_merges_sources_newest_first(seeded) -> None:
    items = get_recent_activity(seeded, per_category=5, limit=5)

    assert len(items) == 5
    timestamps = [item.timestamp for item in items]
    assert timestamps == sorted(timestamps, reverse=True)
    assert {item.category for item in items} == {"event", "task", "member"}
    assert [(item.actor, item.action, item.subject) for item in items] == [
        ("System", "added task", "Reminder"),
        ("bob", "joined event", "Concert"),
        ("alice", "added task", "Bring blanket"),
        ("alice", "created event", "Concert"),
        ("bob", "joined event", "Picnic"),
    ]


def test_item_ids_are_unique_across_categories(seeded) -> None:
    items = get_recent_activity(seeded, per_category=5, limit=10)

    assert len(items) == 6
    assert len({item.id for item in items}) == 6


def test_each_source_is_limited_independently(seeded) -> None:
    items = get_recent_activity(seeded, per_category=1, limit=10)

    assert sorted(item.id.split("-")[0] for item in items) == ["event", "member", "task"]


def test_limit_defaults_come_from_settings(seeded) -> None:
    assert len(get_recent_activity(seeded)) == 5


def test_any_failed_source_fails_the_whole_feed(db_session, monkeypatch) -> None:
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "query", broken_query)

    with pytest.raises(ApiError) as excinfo:
        get_recent_activity(db_session)

    assert excinfo.value.code == "FETCH_RECENT_ACTIVITY_FAILED"
    assert excinfo.value.status_code == 500


def test_zero_limits_are_respected(seeded) -> None:
    assert get_recent_activity(seeded, per_category=0, limit=10) == []
    assert get_recent_activity(seeded, per_category=5, limit=0) == []


def test_owner_memberships_are_not_reported_as_joins(db_session) -> None:
    carol = UserModel(username="carol", email="carol@example.com", password="x", is_active=True)
    db_session.add(carol)
    db_session.flush()
    party = EventModel(owner_id=carol.id, title="Party", color=1, created_at=_at(1))
    db_session.add(party)
    db_session.flush()
    db_session.add(
        EventMemberModel(event_id=party.id, user_id=carol.id, role="owner", joined_at=_at(2))
    )
    db_session.commit()

    items = get_recent_activity(db_session, per_category=5, limit=5)

    assert [(item.actor, item.action) for item in items] == [("carol", "created event")]


def test_blank_title_becomes_untitled(db_session) -> None:
    dave = UserModel(username="dave", email="dave@example.com", password="x", is_active=True)
    db_session.add(dave)
    db_session.flush()
    db_session.add(EventModel(owner_id=dave.id, title="", color=1, created_at=_at(1)))
    db_session.commit()

    items = get_recent_activity(db_session, per_category=5, limit=5)

    assert [item.subject for item in items] == ["Untitled"]


@pytest.mark.parametrize(
    ("user_id", "username", "expected"),
    [
        (None, None, "System"),
        (42, None, "Unknown"),
        (42, "", "Unknown"),
        (42, "erin", "erin"),
    ],
)
def test_actor_placeholders(user_id, username, expected) -> None:
    assert _actor(user_id, username) == expected


def test_subject_placeholder() -> None:
    assert _subject(None) == "Untitled"
    assert _subject("Picnic") == "Picnic"
