"""Integration tests for task and subtask endpoints."""

from __future__ import annotations


def _event(client, headers) -> dict:
    response = client.post("/events", json={"title": "Robotics meetup"}, headers=headers)
    assert response.status_code == 201
    return response.json()


def _task(client, headers, url: str = "/tasks", **payload) -> dict:
    payload.setdefault("title", "Untitled chore")
    response = client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_task_defaults_and_closed_enumerations(client, register_and_login) -> None:
    _, headers = register_and_login("alice")

    task = _task(client, headers, title="Water plants")
    invalid = client.post(
        "/tasks", json={"title": "Bad", "status": "Someday"}, headers=headers
    )

    assert task["status"] == "To Do"
    assert task["priority"] == "Normal"
    assert task["event_id"] is None
    assert invalid.status_code == 422
    assert invalid.json()["code"] == "INVALID_REQUEST"


def test_event_task_with_assignees(client, register_and_login) -> None:
    _, owner_headers = register_and_login("alice")
    bob, _ = register_and_login("bob")
    event = _event(client, owner_headers)

    task = _task(
        client,
        owner_headers,
        url=f"/events/{event['id']}/tasks",
        title="Solder boards",
        priority="Urgent",
        assignee_ids=[bob["id"], bob["id"]],
    )
    unknown = client.post(
        f"/events/{event['id']}/tasks",
        json={"title": "Ghost work", "assignee_ids": [999]},
        headers=owner_headers,
    )

    assert task["event_id"] == event["id"]
    assert task["event_title"] == "Robotics meetup"
    assert [assignee["username"] for assignee in task["assignees"]] == ["bob"]
    assert unknown.status_code == 400
    assert unknown.json()["code"] == "UNKNOWN_ASSIGNEE"


def test_assignee_sees_task_without_membership(client, register_and_login) -> None:
    _, owner_headers = register_and_login("alice")
    bob, bob_headers = register_and_login("bob")
    event = _event(client, owner_headers)
    task = _task(
        client,
        owner_headers,
        url=f"/events/{event['id']}/tasks",
        assignee_ids=[bob["id"]],
    )

    mine = client.get("/tasks", headers=bob_headers).json()

    assert [item["id"] for item in mine["items"]] == [task["id"]]
    assert client.get(f"/tasks/{task['id']}", headers=bob_headers).status_code == 200
    assert client.get(f"/events/{event['id']}/tasks", headers=bob_headers).status_code == 403


def test_personal_tasks_are_private(client, register_and_login) -> None:
    _, alice_headers = register_and_login("alice")
    _, bob_headers = register_and_login("bob")
    task = _task(client, alice_headers, title="Diary")

    response = client.get(f"/tasks/{task['id']}", headers=bob_headers)

    assert response.status_code == 403
    assert response.json()["code"] == "TASK_FORBIDDEN"
    assert client.get("/tasks", headers=bob_headers).json()["items"] == []


def test_list_filters_and_sorting(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    event = _event(client, headers)
    event_tasks = f"/events/{event['id']}/tasks"
    _task(client, headers, url=event_tasks, title="Order parts", status="Done")
    _task(client, headers, url=event_tasks, title="Build chassis", status="In Progress")
    _task(client, headers, title="Laundry", priority="Low")

    hide_done = client.get("/tasks", params={"showCompleted": "false"}, headers=headers).json()
    event_only = client.get(
        "/tasks", params={"showPersonalTasks": "false", "sort": "name"}, headers=headers
    ).json()
    by_status = client.get(
        "/tasks", params=[("status", "Done"), ("status", "Bogus")], headers=headers
    ).json()
    comma_separated = client.get(
        "/tasks", params={"priority": "Low,Urgent"}, headers=headers
    ).json()
    by_progress = client.get(event_tasks, params={"sort": "progress"}, headers=headers).json()

    assert sorted(t["title"] for t in hide_done["items"]) == ["Build chassis", "Laundry"]
    assert [t["title"] for t in event_only["items"]] == ["Build chassis", "Order parts"]
    assert [t["title"] for t in by_status["items"]] == ["Order parts"]
    assert [t["title"] for t in comma_separated["items"]] == ["Laundry"]
    assert [t["status"] for t in by_progress["items"]] == ["In Progress", "Done"]


def test_patch_and_delete_task(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    bob, _ = register_and_login("bob")
    task = _task(client, headers, title="Draft poster", description="A3 size")

    patched = client.patch(
        f"/tasks/{task['id']}",
        json={"status": "In Progress", "assignee_ids": [bob["id"]]},
        headers=headers,
    )
    cleared = client.patch(
        f"/tasks/{task['id']}", json={"description": None}, headers=headers
    )

    assert patched.status_code == 200
    assert patched.json()["status"] == "In Progress"
    assert patched.json()["description"] == "A3 size"
    assert [a["id"] for a in patched.json()["assignees"]] == [bob["id"]]
    assert cleared.json()["description"] is None
    assert [a["id"] for a in cleared.json()["assignees"]] == [bob["id"]]

    assert client.delete(f"/tasks/{task['id']}", headers=headers).status_code == 204
    assert client.get(f"/tasks/{task['id']}", headers=headers).status_code == 404


def test_subtask_lifecycle(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    _, outsider_headers = register_and_login("mallory")
    task = _task(client, headers, title="Pack bags")

    created = client.post(
        f"/tasks/{task['id']}/subtasks", json={"title": "Charger"}, headers=headers
    )
    assert created.status_code == 201
    subtask = created.json()
    assert subtask["status"] == "To Do"

    done = client.patch(f"/subtasks/{subtask['id']}", json={"status": "Done"}, headers=headers)
    assert done.json() == {**subtask, "status": "Done"}

    refreshed = client.get(f"/tasks/{task['id']}", headers=headers).json()
    assert [(s["title"], s["status"]) for s in refreshed["subtasks"]] == [("Charger", "Done")]

    assert client.delete(f"/subtasks/{subtask['id']}", headers=outsider_headers).status_code == 403
    assert client.delete(f"/subtasks/{subtask['id']}", headers=headers).status_code == 204
    assert client.patch(
        f"/subtasks/{subtask['id']}", json={"title": "Gone"}, headers=headers
    ).status_code == 404


def test_assignee_options_cover_assignees_and_members(client, register_and_login) -> None:
    alice, headers = register_and_login("alice")
    bob, _ = register_and_login("bob")
    event = _event(client, headers)
    _task(client, headers, url=f"/events/{event['id']}/tasks", assignee_ids=[bob["id"]])

    response = client.get("/tasks/assignees", headers=headers)

    assert response.status_code == 200
    assert response.json() == sorted([str(alice["id"]), "bob"])
