"""Shared schema helpers."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a list endpoint; ``next_page`` is ``None`` on the last page."""

    items: list[T]
    next_page: int | None = None


def reject_null(value):
    """Validator body for patch fields that may be omitted but not cleared."""

    if value is None:
        raise ValueError("This field may be omitted but not set to null")
    return value
