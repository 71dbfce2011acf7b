"""Websocket endpoint streaming row changes of an event."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from event_planner.application.use_cases.access import load_event_for_member
from event_planner.domain.errors import ApiError
from event_planner.infrastructure.database import SessionLocal
from event_planner.infrastructure.realtime import event_channel_manager
from event_planner.interfaces.api.dependencies import resolve_current_user

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)

_POLICY_VIOLATION = 1008


@router.websocket("/events/{event_id}/ws")
async def event_changes_websocket(websocket: WebSocket, event_id: int) -> None:
    """Stream ``{type: "change", ...}`` messages for the event's tasks and members."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=403, detail="User is inactive")
        load_event_for_member(session, event_id, user)
    except (HTTPException, ApiError) as exc:
        logger.info("Rejected websocket for event %s: %s", event_id, exc)
        await websocket.close(code=_POLICY_VIOLATION)
        return
    finally:
        session.close()

    await event_channel_manager.connect(event_id, websocket)
    try:
        while True:
            message = await websocket.receive_json()
            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        pass
    finally:
        event_channel_manager.disconnect(event_id, websocket)
