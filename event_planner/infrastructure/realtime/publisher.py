"""Publish row changes of an event to its websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any

from anyio import from_thread

from .manager import EventChannelManager, event_channel_manager

logger = logging.getLogger(__name__)

CHANGE_INSERT = "INSERT"
CHANGE_UPDATE = "UPDATE"
CHANGE_DELETE = "DELETE"


class EventChangePublisher:
    """Serialize entity snapshots and schedule their delivery."""

    def __init__(self, manager: EventChannelManager) -> None:
        self._manager = manager

    def dispatch(
        self,
        event_id: int | None,
        *,
        table: str,
        change: str,
        new: Any = None,
        old: Any = None,
    ) -> None:
        """Schedule a ``change`` message for the subscribers of ``event_id``."""

        if event_id is None or not self._manager.subscriber_count(event_id):
            return

        message = {
            "type": "change",
            "table": table,
            "event_type": change,
            "new": serialize_snapshot(new),
            "old": serialize_snapshot(old),
        }
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sync route handlers run in a worker thread.
            try:
                from_thread.run(self._manager.broadcast, event_id, message)
            except RuntimeError as exc:
                logger.warning("Unable to deliver %s change for event %s: %s", table, event_id, exc)
        else:
            loop.create_task(self._manager.broadcast(event_id, message))


def serialize_snapshot(value: Any) -> Any:
    """Return a JSON-serializable copy of a dataclass entity (or ``None``)."""

    if value is None:
        return None
    payload = asdict(value) if is_dataclass(value) else value
    return _normalize(payload)


def _normalize(data: Any) -> Any:
    if isinstance(data, datetime):
        return data.isoformat()
    if isinstance(data, dict):
        return {key: _normalize(item) for key, item in data.items()}
    if isinstance(data, (list, tuple)):
        return [_normalize(item) for item in data]
    return data


event_change_publisher = EventChangePublisher(event_channel_manager)


def publish_change(
    event_id: int | None,
    *,
    table: str,
    change: str,
    new: Any = None,
    old: Any = None,
) -> None:
    """Public helper that delegates to the shared publisher instance."""

    event_change_publisher.dispatch(event_id, table=table, change=change, new=new, old=old)


__all__ = [
    "CHANGE_DELETE",
    "CHANGE_INSERT",
    "CHANGE_UPDATE",
    "EventChangePublisher",
    "event_change_publisher",
    "publish_change",
    "serialize_snapshot",
]
