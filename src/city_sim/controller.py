"""City controller: owns the simulation state and serializes every change.

Edits, steps, resets and progress updates all go through one controller so
that each mutation batch is followed by exactly one stats recompute and one
round of change notifications.
"""

import logging
import random
from collections.abc import Callable
from typing import Any

from city_sim.leveling.progress import PlayerProgress, growth_bonus, resolve_tool
from city_sim.sim.editing import PaintResult, paint
from city_sim.sim.engine import GrowthEngine
from city_sim.sim.state import SimulationState
from city_sim.sim.types import CityStats, SimulationProfile, StepReport, TileKind

logger = logging.getLogger(__name__)

Listener = Callable[["CityController"], None]


class CityController:
    """Single writer of the grid, stats and money."""

    def __init__(self, profile: SimulationProfile, seed: int | None = None) -> None:
        self.profile = profile
        self.seed = seed
        self.state = SimulationState(profile)
        self.engine = GrowthEngine(profile, random.Random(seed))
        self.progress = PlayerProgress()
        self._listeners: list[Listener] = []
        self.state.recompute()

    @property
    def stats(self) -> CityStats:
        return self.state.stats

    @property
    def day(self) -> int:
        return self.state.day

    @property
    def money(self) -> float | None:
        return self.state.money

    def add_listener(self, listener: Listener) -> None:
        """Register a callback run after every change (e.g. a redraw)."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("City listener failed")

    def step(self, days: int = 1) -> list[StepReport]:
        """Advance the simulation by whole days."""
        reports = [self.engine.step(self.state) for _ in range(max(0, days))]
        if reports:
            self._notify()
        return reports

    def paint(self, row: int, col: int, tool: str | TileKind, brush: bool = False) -> PaintResult:
        """Paint with a tool selector; unknown or locked tools paint road."""
        kind = resolve_tool(str(tool), self.profile, self.progress.level)
        result = paint(self.state, row, col, kind, brush)
        self._notify()
        return result

    def reset(self) -> None:
        """Back to an empty city on day 0 with starting money."""
        self.state.reset()
        if self.seed is not None:
            self.engine.seed(self.seed)
        logger.info("City reset")
        self._notify()

    def apply_progress(self, level: Any, xp: Any, total_xp: Any = None) -> float:
        """Take new level/XP from the persistence layer and refresh the bonus."""
        progress = PlayerProgress.from_fields({
            "level": level,
            "xp": xp,
            "totalXp": total_xp if total_xp is not None else self.progress.total_xp,
        })
        self.progress = progress
        self.state.growth_bonus = (
            growth_bonus(progress.level, progress.xp) if self.profile.progress_bonus else 1.0
        )
        logger.info(
            "Progress level=%d xp=%s growth_bonus=%.3f",
            progress.level, progress.xp, self.state.growth_bonus,
        )
        self._notify()
        return self.state.growth_bonus

    def snapshot(self) -> dict[str, Any]:
        """Grid and stats as plain data, the inputs a renderer needs."""
        kinds, levels = self.state.grid.to_lists()
        return {
            "profile": self.profile.name,
            "size": self.state.grid.size,
            "day": self.state.day,
            "money": self.state.money,
            "growth_bonus": self.state.growth_bonus,
            "stats": self.state.stats.to_dict(),
            "kinds": kinds,
            "levels": levels,
        }
