"""Database entities."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import DateTime, event
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for every entity."""


class BaseEntity:
    """Columns shared by every entity: id and timestamps."""

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    def touch(self) -> None:
        """Stamp ``updated_at`` with now, and ``created_at`` too if it is unset."""
        now = datetime.now()
        self.updated_at = now
        if self.created_at is None:
            self.created_at = now


@event.listens_for(BaseEntity, "before_insert", propagate=True)
@event.listens_for(BaseEntity, "before_update", propagate=True)
def _stamp(mapper: Any, connection: Any, target: BaseEntity) -> None:
    target.touch()


class Example(BaseEntity, Base):
    """An example priced item."""

    __tablename__ = "examples"

    name: Mapped[str] = mapped_column(default="")
    price: Mapped[float] = mapped_column(default=0.0)