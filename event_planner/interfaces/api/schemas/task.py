"""Task and subtask schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import reject_null
from .user import UserSummaryRead

TaskStatus = Literal["To Do", "In Progress", "Done"]
TaskPriority = Literal["Urgent", "High", "Normal", "Low"]


class SubtaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    status: TaskStatus = "To Do"


class SubtaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    status: TaskStatus | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", "status")
    @classmethod
    def fields_not_null(cls, value):
        return reject_null(value)


class SubtaskRead(BaseModel):
    id: int
    task_id: int
    title: str
    status: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    status: TaskStatus = "To Do"
    priority: TaskPriority = "Normal"
    start_at: datetime | None = None
    end_at: datetime | None = None
    event_id: int | None = Field(
        default=None,
        description="Event the task belongs to; omit for a personal task",
    )
    assignee_ids: list[int] = Field(default_factory=list)


class TaskUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    assignee_ids: list[int] | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", "status", "priority")
    @classmethod
    def fields_not_null(cls, value):
        return reject_null(value)


class TaskRead(BaseModel):
    id: int
    event_id: int | None
    event_title: str | None = None
    title: str
    description: str | None
    status: str
    priority: str
    start_at: datetime | None
    end_at: datetime | None
    created_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    assignees: list[UserSummaryRead] = Field(default_factory=list)
    subtasks: list[SubtaskRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
