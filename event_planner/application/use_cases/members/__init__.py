"""Use cases for managing event membership."""

from .invite_member import invite_member
from .list_members import list_members
from .remove_member import remove_member

__all__ = ["invite_member", "list_members", "remove_member"]
