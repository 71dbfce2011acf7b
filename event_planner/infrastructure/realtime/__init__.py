"""Realtime change feeds for event subscribers."""

from .manager import EventChannelManager, event_channel_manager
from .publisher import (
    CHANGE_DELETE,
    CHANGE_INSERT,
    CHANGE_UPDATE,
    EventChangePublisher,
    event_change_publisher,
    publish_change,
    serialize_snapshot,
)

__all__ = [
    "CHANGE_DELETE",
    "CHANGE_INSERT",
    "CHANGE_UPDATE",
    "EventChangePublisher",
    "EventChannelManager",
    "event_change_publisher",
    "event_channel_manager",
    "publish_change",
    "serialize_snapshot",
]
