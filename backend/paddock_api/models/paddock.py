"""Paddock ORM — parent record holding embedded steps and systems.

Invariants:
    - title is non-nullable text
    - owner_id is set at creation and never updated
    - steps / systems are ordered JSON lists of child dicts (see core/embedded_list.py)
    - version increments on every UPDATE; a stale write raises StaleDataError

Design Decisions:
    - JSON columns for embedded lists: the children are written as a unit with the
      parent, deleting the paddock deletes them with it
    - version_id_col: optimistic concurrency, so two concurrent appends cannot
      silently drop one of the writes
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from paddock_api.db.base import Base


class Paddock(Base):
    """Paddock aggregate root — owns its embedded children."""
    __tablename__ = "paddocks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    steps: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    systems: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __mapper_args__ = {"version_id_col": version}
