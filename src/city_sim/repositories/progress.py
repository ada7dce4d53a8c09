"""Progress repository - reads and writes flat key-value fields."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from city_sim.models import ProgressField

PROGRESS_KEYS = ("level", "xp", "totalXp")
TIMER_KEYS = (
    "timerRunning",
    "endTime",
    "remainingSeconds",
    "startTime",
    "activeDurationSeconds",
    "totalWorkedSeconds",
)
TOKEN_KEY = "canvasToken"


async def get_fields(db: AsyncSession, keys: tuple[str, ...] | list[str]) -> dict[str, Any]:
    """Fetch stored values for the given keys; missing keys are left out."""
    result = await db.execute(select(ProgressField).where(ProgressField.key.in_(list(keys))))
    return {row.key: row.value for row in result.scalars().all()}


async def set_fields(db: AsyncSession, values: dict[str, Any]) -> list[str]:
    """Upsert fields. Returns the keys whose stored value actually changed."""
    if not values:
        return []
    existing = await db.execute(
        select(ProgressField).where(ProgressField.key.in_(list(values)))
    )
    rows = {row.key: row for row in existing.scalars().all()}

    changed = []
    for key, value in values.items():
        row = rows.get(key)
        if row is None:
            db.add(ProgressField(key=key, value=value))
            changed.append(key)
        elif row.value != value:
            row.value = value
            changed.append(key)

    await db.commit()
    return changed
