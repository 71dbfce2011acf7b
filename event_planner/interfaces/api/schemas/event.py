"""Event and membership schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import reject_null


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    cover_image_uri: str | None = Field(default=None, max_length=500)
    color: int = Field(default=1, ge=0)
    start_at: datetime | None = None
    end_at: datetime | None = None


class EventUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    cover_image_uri: str | None = Field(default=None, max_length=500)
    color: int | None = Field(default=None, ge=0)
    start_at: datetime | None = None
    end_at: datetime | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", "color")
    @classmethod
    def title_and_color_not_null(cls, value):
        return reject_null(value)


class EventMemberRead(BaseModel):
    id: int
    event_id: int
    user_id: int
    role: str
    joined_at: datetime | None
    username: str | None = None
    email: str | None = None

    model_config = ConfigDict(from_attributes=True)


class EventMemberCreate(BaseModel):
    user_id: int = Field(..., ge=1)
    role: Literal["member"] = "member"


class EventRead(BaseModel):
    id: int
    owner_id: int | None
    title: str
    description: str | None
    location: str | None
    cover_image_uri: str | None
    color: int
    start_at: datetime | None
    end_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    members: list[EventMemberRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
