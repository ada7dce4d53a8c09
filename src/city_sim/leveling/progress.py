"""Player progress: level, XP, growth bonus and tool unlocks."""

import math
from dataclasses import dataclass
from typing import Any

from city_sim.sim.types import SimulationProfile, TileKind

XP_PER_LEVEL = 100
MAX_GROWTH_BONUS = 1.6
LEVEL_BONUS = 0.03
XP_BONUS = 0.05

# Player level at which each tool becomes available
TOOL_UNLOCKS: dict[TileKind, int] = {
    TileKind.EMPTY: 1,
    TileKind.ROAD: 1,
    TileKind.RESIDENTIAL: 1,
    TileKind.PARK: 2,
    TileKind.COMMERCIAL: 3,
    TileKind.PLAZA: 3,
    TileKind.INDUSTRIAL: 4,
    TileKind.SCHOOL: 5,
}

# Short tool names accepted alongside the full kind names
TOOL_ALIASES: dict[str, TileKind] = {
    "res": TileKind.RESIDENTIAL,
    "com": TileKind.COMMERCIAL,
    "ind": TileKind.INDUSTRIAL,
}


def _finite_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass
class PlayerProgress:
    """Level and XP as read from the persistence layer."""

    level: int = 1
    xp: float = 0
    total_xp: float = 0

    def to_fields(self) -> dict[str, Any]:
        return {"level": self.level, "xp": self.xp, "totalXp": self.total_xp}

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "PlayerProgress":
        """Build progress from stored fields, sanitizing missing or bad values."""
        level, xp = sanitize_progress(fields.get("level"), fields.get("xp"))
        total = _finite_number(fields.get("totalXp"))
        return cls(level=level, xp=xp, total_xp=total if total is not None else xp)


def sanitize_progress(level: Any, xp: Any) -> tuple[int, float]:
    """Coerce stored progress to finite values: level defaults to 1, xp to 0."""
    clean_level = _finite_number(level)
    clean_xp = _finite_number(xp)
    return (
        int(clean_level) if clean_level is not None and clean_level >= 1 else 1,
        clean_xp if clean_xp is not None and clean_xp >= 0 else 0,
    )


def growth_bonus(level: Any, xp: Any) -> float:
    """Multiplier applied to growth chances (and mirrored on decay chances)."""
    clean_level, clean_xp = sanitize_progress(level, xp)
    xp_progress = min(1.0, clean_xp / XP_PER_LEVEL)
    return min(MAX_GROWTH_BONUS, 1 + clean_level * LEVEL_BONUS + xp_progress * XP_BONUS)


def award_xp(progress: PlayerProgress, amount: float) -> bool:
    """Add XP, levelling up once per full bar and keeping the remainder.

    Returns True if at least one level was gained.
    """
    if amount <= 0:
        return False
    progress.total_xp += amount
    progress.xp += amount
    leveled = False
    while progress.xp >= XP_PER_LEVEL:
        progress.level += 1
        progress.xp -= XP_PER_LEVEL
        leveled = True
    return leveled


def is_unlocked(kind: TileKind, level: int) -> bool:
    return level >= TOOL_UNLOCKS.get(kind, 1)


def unlocked_tools(profile: SimulationProfile, level: int) -> list[TileKind]:
    """Kinds the player may paint with in this edition at this level."""
    return [
        kind for kind in TileKind
        if kind in profile.tile_kinds
        and (not profile.progress_bonus or is_unlocked(kind, level))
    ]


def resolve_tool(selector: str, profile: SimulationProfile, level: int = 1) -> TileKind:
    """Translate a tool selector to a tile kind.

    Unknown selectors, kinds outside the edition, and tools still locked at
    the player's level all fall back to road.
    """
    key = selector.strip().lower()
    kind = TOOL_ALIASES.get(key)
    if kind is None:
        try:
            kind = TileKind(key)
        except ValueError:
            return TileKind.ROAD
    if kind not in profile.tile_kinds:
        return TileKind.ROAD
    if profile.progress_bonus and not is_unlocked(kind, level):
        return TileKind.ROAD
    return kind
