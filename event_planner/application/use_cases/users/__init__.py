"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .get_user import get_user
from .list_users import list_users
from .register_user import register_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "get_user",
    "list_users",
    "register_user",
]
