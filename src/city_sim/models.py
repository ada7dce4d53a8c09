"""Flat key-value storage for player progress and timer fields."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from city_sim.database import Base


class ProgressField(Base):
    """One stored field, e.g. ``level`` or ``totalWorkedSeconds``."""

    __tablename__ = "progress_fields"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
