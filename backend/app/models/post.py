"""Post ORM — a row of the hosted `posts` table.

Invariants:
    - id is UUID primary key (client default uuid4, server default gen_random_uuid())
    - title (<= 200 chars), content and user_id are non-nullable
    - created_at is timezone-aware, set once at insert

Design Decisions:
    - Generic Uuid type: native UUID on Postgres, CHAR(32) on SQLite test runs
    - user_id carries no ForeignKey: the hosted store owns users and referential integrity
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Post(Base):
    """A user-authored post."""
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
