"""User ORM — identity records consulted by the bearer-token verifier.

Invariants:
    - email is unique
    - token_digest holds sha256(token), never the raw token

Design Decisions:
    - Users are provisioned by the external identity provider; this service only reads them
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from paddock_api.db.base import Base


class User(Base):
    """Authenticated identity — the owner referenced by paddocks and steps."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    token_digest: Mapped[str | None] = mapped_column(
        String(64), nullable=True, unique=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
