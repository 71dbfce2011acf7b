from .activity import ActivityItemRead
from .auth import Token
from .common import Page
from .event import (
    EventCreate,
    EventMemberCreate,
    EventMemberRead,
    EventRead,
    EventUpdate,
)
from .task import (
    SubtaskCreate,
    SubtaskRead,
    SubtaskUpdate,
    TaskCreate,
    TaskRead,
    TaskUpdate,
)
from .user import UserCreate, UserRead, UserSummaryRead

__all__ = [
    "ActivityItemRead",
    "EventCreate",
    "EventMemberCreate",
    "EventMemberRead",
    "EventRead",
    "EventUpdate",
    "Page",
    "SubtaskCreate",
    "SubtaskRead",
    "SubtaskUpdate",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "Token",
    "UserCreate",
    "UserRead",
    "UserSummaryRead",
]
