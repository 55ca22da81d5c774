"""Participant ORM — one person's percentage share of the whole.

Invariants:
    - id is a UUID primary key assigned on insert, immutable thereafter
    - first_name / last_name stored trimmed (validator normalizes before insert)
    - participation within [0, 100]; the global sum is enforced by the validator,
      not by the table

Design Decisions:
    - Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite test DBs
    - created_at kept as a stable secondary key for deterministic listing
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, DateTime, Uuid, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Participant(Base):
    """Stored participant record."""
    __tablename__ = "participants"
    __table_args__ = (
        CheckConstraint(
            "participation >= 0 AND participation <= 100",
            name="ck_participants_participation_range",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    participation: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return (
            f"<Participant {self.id} {self.first_name} {self.last_name} "
            f"{self.participation}%>"
        )
