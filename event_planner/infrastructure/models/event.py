"""SQLAlchemy models for events and their membership join records."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from event_planner.infrastructure.database import Base
from event_planner.utils import now_in_app_timezone


class EventModel(Base):
    """Database representation of an event."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    cover_image_uri = Column(String(500), nullable=True)
    color = Column(Integer, nullable=False, default=1)
    start_at = Column(DateTime(timezone=True), nullable=True)
    end_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )

    owner = relationship("UserModel", lazy="joined")
    members = relationship(
        "EventMemberModel",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EventMemberModel.joined_at",
    )
    tasks = relationship(
        "TaskModel",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class EventMemberModel(Base):
    """Membership of a user in an event."""

    __tablename__ = "event_members"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_members_event_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(String(30), nullable=False, default="member")
    joined_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    event = relationship("EventModel", back_populates="members")
    user = relationship("UserModel", lazy="joined")


__all__ = ["EventMemberModel", "EventModel"]
