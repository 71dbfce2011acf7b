"""Domain entities describing events and their members."""

from dataclasses import dataclass, field
from datetime import datetime

MEMBER_ROLE_OWNER = "owner"
MEMBER_ROLE_MEMBER = "member"

DEFAULT_EVENT_COLOR = 1


@dataclass
class EventMember:
    """A user's membership in an event (the membership join record)."""

    id: int | None
    event_id: int
    user_id: int
    role: str
    joined_at: datetime | None
    username: str | None = None
    email: str | None = None


@dataclass
class Event:
    """Something students plan together."""

    id: int | None
    owner_id: int
    title: str
    description: str | None
    location: str | None
    cover_image_uri: str | None
    color: int
    start_at: datetime | None
    end_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    members: list[EventMember] = field(default_factory=list)

    def member_ids(self) -> list[int]:
        return [member.user_id for member in self.members]

    def is_owner(self, user_id: int | None) -> bool:
        return user_id is not None and self.owner_id == user_id

    def has_member(self, user_id: int | None) -> bool:
        """Return ``True`` when ``user_id`` owns or belongs to the event."""

        return self.is_owner(user_id) or user_id in self.member_ids()


__all__ = [
    "DEFAULT_EVENT_COLOR",
    "Event",
    "EventMember",
    "MEMBER_ROLE_MEMBER",
    "MEMBER_ROLE_OWNER",
]
