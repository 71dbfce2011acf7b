"""Connection management for event change websockets."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class EventChannelManager:
    """Manage active websocket connections grouped by event."""

    def __init__(self) -> None:
        self._connections: DefaultDict[int, Set[WebSocket]] = defaultdict(set)

    async def connect(self, event_id: int, websocket: WebSocket) -> None:
        """Accept the websocket connection and subscribe it to ``event_id``."""

        await websocket.accept()
        self._connections[event_id].add(websocket)
        logger.debug("Websocket subscribed to event %s", event_id)

    def disconnect(self, event_id: int, websocket: WebSocket) -> None:
        """Remove ``websocket`` from the subscribers of ``event_id``."""

        connections = self._connections.get(event_id)
        if connections is None:
            return
        connections.discard(websocket)
        if not connections:
            self._connections.pop(event_id, None)

    def subscriber_count(self, event_id: int) -> int:
        return len(self._connections.get(event_id, ()))

    async def broadcast(self, event_id: int, message: dict[str, Any]) -> None:
        """Send ``message`` to every connection subscribed to ``event_id``."""

        connections = list(self._connections.get(event_id, set()))
        for connection in connections:
            try:
                await connection.send_json(message)
            except Exception as exc:  # pragma: no cover - socket already gone
                logger.warning(
                    "Dropping websocket for event %s after send failure: %s",
                    event_id,
                    exc,
                )
                self.disconnect(event_id, connection)


event_channel_manager = EventChannelManager()


__all__ = ["EventChannelManager", "event_channel_manager"]
