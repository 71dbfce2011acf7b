"""SQLAlchemy models for tasks, their assignees and subtasks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from event_planner.infrastructure.database import Base
from event_planner.utils import now_in_app_timezone

task_assignee_table = Table(
    "task_assignees",
    Base.metadata,
    Column(
        "task_id",
        Integer,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class TaskModel(Base):
    """Database representation of a task."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="To Do")
    priority = Column(String(20), nullable=False, default="Normal")
    start_at = Column(DateTime(timezone=True), nullable=True)
    end_at = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )

    event = relationship("EventModel", back_populates="tasks", lazy="joined")
    creator = relationship("UserModel", foreign_keys=[created_by], lazy="joined")
    assignees = relationship(
        "UserModel",
        secondary=task_assignee_table,
        lazy="selectin",
        order_by="UserModel.id",
    )
    subtasks = relationship(
        "SubtaskModel",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="SubtaskModel.id",
    )


class SubtaskModel(Base):
    """Database representation of a subtask."""

    __tablename__ = "subtasks"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(
        Integer,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default="To Do")
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    task = relationship("TaskModel", back_populates="subtasks")


__all__ = ["SubtaskModel", "TaskModel", "task_assignee_table"]
