"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    email: str
    password: str
    avatar_url: str | None
    is_active: bool
    created_at: datetime | None

    def display_name(self) -> str:
        """Return the label shown next to this user's actions."""

        return self.username or self.email


@dataclass(frozen=True)
class UserSummary:
    """Lightweight view of a user embedded in tasks and members."""

    id: int
    username: str
    email: str
    avatar_url: str | None = None

    def label(self) -> str:
        """Return the preferred human label: username, then email, then id."""

        return self.username or self.email or str(self.id)

    def search_keys(self) -> list[str]:
        keys = [key for key in (self.username, self.email) if key]
        keys.append(str(self.id))
        return keys
