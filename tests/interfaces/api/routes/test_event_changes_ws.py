"""Tests for the event change websocket."""

from __future__ import annotations

import pytest
from starlette.websockets import WebSocketDisconnect


def _token(headers: dict[str, str]) -> str:
    return headers["Authorization"].split(" ", 1)[1]


def test_connection_without_token_is_refused(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    event = client.post("/events", json={"title": "Demo day"}, headers=headers).json()

    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect(f"/events/{event['id']}/ws"):
            pass

    assert excinfo.value.code == 1008


def test_non_members_are_refused(client, register_and_login) -> None:
    _, owner_headers = register_and_login("alice")
    _, outsider_headers = register_and_login("mallory")
    event = client.post("/events", json={"title": "Demo day"}, headers=owner_headers).json()

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect(
            f"/events/{event['id']}/ws?token={_token(outsider_headers)}"
        ):
            pass


def test_task_changes_are_streamed_to_members(client, register_and_login) -> None:
    _, headers = register_and_login("alice")
    event = client.post("/events", json={"title": "Demo day"}, headers=headers).json()

    with client.websocket_connect(f"/events/{event['id']}/ws?token={_token(headers)}") as ws:
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

        task = client.post(
            f"/events/{event['id']}/tasks", json={"title": "Set up booth"}, headers=headers
        ).json()
        inserted = ws.receive_json()

        client.delete(f"/tasks/{task['id']}", headers=headers)
        deleted = ws.receive_json()

    assert inserted["type"] == "change"
    assert inserted["table"] == "tasks"
    assert inserted["event_type"] == "INSERT"
    assert inserted["new"]["title"] == "Set up booth"
    assert inserted["old"] is None
    assert deleted["event_type"] == "DELETE"
    assert deleted["old"]["id"] == task["id"]
