"""Error types surfaced to API clients as ``{code, message, hint}`` bodies."""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    """Base error carrying a short code, a human message and an optional hint."""

    status_code = 400

    def __init__(
        self,
        code: str,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class InvalidInputError(ApiError):
    status_code = 400


class PermissionDeniedError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


__all__ = [
    "ApiError",
    "ConflictError",
    "InvalidInputError",
    "NotFoundError",
    "PermissionDeniedError",
]
