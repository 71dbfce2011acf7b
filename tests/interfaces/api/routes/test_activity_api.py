"""Integration tests for the activity feed endpoints."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from event_planner.infrastructure.repositories import ActivityLogRepository


def test_recent_activity_merges_events_tasks_and_joins(client, register_and_login) -> None:
    _, alice_headers = register_and_login("alice")
    bob, _ = register_and_login("bob")

    event = client.post("/events", json={"title": "Game night"}, headers=alice_headers).json()
    client.post(f"/events/{event['id']}/members", json={"user_id": bob["id"]}, headers=alice_headers)
    client.post(
        f"/events/{event['id']}/tasks", json={"title": "Buy dice"}, headers=alice_headers
    )

    response = client.get("/activities/recent", headers=alice_headers)

    assert response.status_code == 200
    items = response.json()
    assert len(items) == 3
    assert items[0] == {
        "id": items[0]["id"],
        "actor": "alice",
        "action": "added task",
        "subject": "Buy dice",
        "timestamp": items[0]["timestamp"],
        "category": "task",
        "actor_avatar": None,
    }
    assert {(item["actor"], item["action"]) for item in items} == {
        ("alice", "added task"),
        ("bob", "joined event"),
        ("alice", "created event"),
    }
    assert len(client.get("/activities/recent", params={"limit": 2}, headers=alice_headers).json()) == 2


def test_creating_an_event_adds_one_feed_item(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    client.post("/events", json={"title": "Fair"}, headers=headers)

    items = client.get("/activities/recent", headers=headers).json()

    assert [(item["actor"], item["action"], item["subject"]) for item in items] == [
        ("alice", "created event", "Fair"),
    ]


def test_log_feeds_use_event_task_and_member_categories(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    bob, _ = register_and_login("bob")
    event = client.post("/events", json={"title": "Hack night"}, headers=headers).json()
    task = client.post(
        f"/events/{event['id']}/tasks", json={"title": "Order pizza"}, headers=headers
    ).json()
    client.post(f"/tasks/{task['id']}/subtasks", json={"title": "Pick toppings"}, headers=headers)
    client.post(f"/events/{event['id']}/members", json={"user_id": bob["id"]}, headers=headers)

    items = client.get(f"/events/{event['id']}/activities", headers=headers).json()

    assert [(item["action"], item["category"]) for item in items] == [
        ("joined event", "member"),
        ("added subtask", "task"),
        ("created task", "task"),
        ("created event", "event"),
    ]

    personal = client.post("/tasks", json={"title": "Nap"}, headers=headers).json()
    client.post(f"/tasks/{personal['id']}/subtasks", json={"title": "Alarm"}, headers=headers)

    personal_items = client.get("/activities/personal", headers=headers).json()
    assert {item["category"] for item in personal_items} == {"task"}


def test_event_activity_log_lists_latest_five(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    event = client.post("/events", json={"title": "Bake sale"}, headers=headers).json()
    for index in range(6):
        client.post(
            f"/events/{event['id']}/tasks", json={"title": f"Cake {index}"}, headers=headers
        )

    items = client.get(f"/events/{event['id']}/activities", headers=headers).json()

    assert len(items) == 5
    assert items[0]["subject"] == "Cake 5"
    assert items[0]["action"] == "created task"
    assert all(item["category"] == "task" for item in items)


def test_personal_activity_only_covers_tasks_without_event(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    event = client.post("/events", json={"title": "Trip"}, headers=headers).json()
    client.post(f"/events/{event['id']}/tasks", json={"title": "Tickets"}, headers=headers)
    task = client.post("/tasks", json={"title": "Stretch"}, headers=headers).json()
    client.patch(f"/tasks/{task['id']}", json={"status": "Done"}, headers=headers)

    items = client.get("/activities/personal", headers=headers).json()

    assert [(item["action"], item["subject"]) for item in items] == [
        ("updated personal task", "Stretch"),
        ("created personal task", "Stretch"),
    ]


def test_failed_log_write_does_not_fail_the_request(
    client, register_and_login, monkeypatch
) -> None:
    _, headers = register_and_login("alice")

    def broken_add(self, log):
        from event_planner.domain.errors import ApiError

        raise ApiError("ACTIVITY_LOG_FAILED", "disk full", status_code=500)

    monkeypatch.setattr(ActivityLogRepository, "add", broken_add)

    response = client.post("/tasks", json={"title": "Still saved"}, headers=headers)

    assert response.status_code == 201
    assert client.get("/activities/personal", headers=headers).json() == []


def test_recent_activity_failure_is_reported_as_one_error(client, monkeypatch) -> None:
    from sqlalchemy.orm import Session

    from event_planner.domain.entities import User
    from event_planner.interfaces.api.dependencies import get_current_active_user

    client.app.dependency_overrides[get_current_active_user] = lambda: User(
        id=1,
        username="alice",
        email="alice@example.com",
        password="",
        avatar_url=None,
        is_active=True,
        created_at=None,
    )

    def broken_query(self, *args, **kwargs):
        raise SQLAlchemyError("connection reset")

    monkeypatch.setattr(Session, "query", broken_query)

    response = client.get("/activities/recent")

    assert response.status_code == 500
    assert response.json()["code"] == "FETCH_RECENT_ACTIVITY_FAILED"
