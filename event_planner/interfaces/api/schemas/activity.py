"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ActivityItemRead(BaseModel):
    id: str = Field(..., description="Identifier unique within one feed response")
    actor: str = Field(..., description="Display name of the user who acted")
    action: str = Field(..., description="Short verb phrase such as 'added task'")
    subject: str = Field(..., description="Title of the event or task acted upon")
    timestamp: datetime = Field(..., description="When the action happened")
    category: Literal["event", "task", "member"]
    actor_avatar: str | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityItemRead"]
