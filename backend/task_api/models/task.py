"""Task ORM — persists the single domain entity.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert
    - descripcion is non-nullable text
    - registration_date set once on insert, never updated

Design Decisions:
    - Integer serial id: list order is insertion order (ORDER BY id)
    - is_premium column keeps its legacy name; API input is is_finalizada
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base


class Task(Base):
    """Task entity — description, note, premium flag, registration timestamp."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    descripcion: Mapped[str] = mapped_column(Text, nullable=False)
    observacion: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_premium: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
