"""SQLAlchemy model for recorded user actions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from event_planner.infrastructure.database import Base
from event_planner.utils import now_in_app_timezone

_metadata_json_type = JSONB().with_variant(JSON(), "sqlite")


class ActivityLogModel(Base):
    """Append-only log of actions performed on events, tasks and subtasks."""

    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    event_id = Column(
        Integer,
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    action_type = Column(String(30), nullable=False)
    entity_type = Column(String(20), nullable=False)
    entity_title = Column(String(200), nullable=False)
    # ``metadata`` is reserved on declarative classes.
    details = Column("metadata", _metadata_json_type, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    user = relationship("UserModel", lazy="joined")


__all__ = ["ActivityLogModel"]
