"""Helper utilities shared across API route handlers."""

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int) -> tuple[list[T], int | None]:
    """Slice ``items`` to one page and return the next page number, if any."""

    start = (page - 1) * page_size
    end = start + page_size
    next_page = page + 1 if end < len(items) else None
    return list(items[start:end]), next_page


def split_query_values(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma separated query values."""

    result: list[str] = []
    for value in values or ():
        result.extend(part.strip() for part in value.split(",") if part.strip())
    return result


def pick_allowed(values: Iterable[str] | None, allowed: Sequence[str]) -> list[str]:
    """Keep only the values that belong to ``allowed``; unknown ones are ignored."""

    return [value for value in split_query_values(values) if value in allowed]
