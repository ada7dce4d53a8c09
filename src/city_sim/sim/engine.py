"""Growth/decay engine.

One simulation step sweeps every zone tile in row-major order and, based on
road access, nearby jobs or population, amenities and the previous step's
city stats, draws once for growth and, failing that, once for decay.
Afterwards stats are recomputed and the economy ledger (if any) is settled.
"""

import logging
import random

from city_sim.sim.spatial import (
    amenity_influence,
    has_adjacent_road,
    nearby_jobs_score,
    nearby_population,
)
from city_sim.sim.state import SimulationState
from city_sim.sim.types import (
    MAX_LEVEL,
    ChangeEntry,
    CityStats,
    SimulationProfile,
    StepReport,
    TileKind,
    ZONE_KINDS,
)

logger = logging.getLogger(__name__)

# Chance per step that a developed tile without road access loses a level
ISOLATED_DECAY_CHANCE = 0.45


def residential_chances(
    jobs_score: float, amenity_bonus: float, stats: CityStats, growth_bonus: float,
) -> tuple[float, float]:
    """(grow, decay) chances for a residential tile."""
    want = jobs_score + amenity_bonus * 2
    grow = min(0.55, 0.08 + want / 80) * (stats.happiness / 70) * growth_bonus
    decay = max(0.0, 0.12 - stats.happiness / 140) * (2 - growth_bonus)
    return grow, decay


def commercial_chances(
    population: float, amenity_bonus: float, stats: CityStats, growth_bonus: float,
) -> tuple[float, float]:
    """(grow, decay) chances for a commercial tile."""
    grow = (
        min(0.5, 0.06 + population / 250)
        * (stats.happiness / 80)
        * (1 + amenity_bonus / 30)
        * growth_bonus
    )
    decay = max(0.0, 0.10 - stats.happiness / 160) * (2 - growth_bonus)
    return grow, decay


def industrial_chances(
    amenity_bonus: float, stats: CityStats, growth_bonus: float,
) -> tuple[float, float]:
    """(grow, decay) chances for an industrial tile."""
    unmet = max(0, stats.population - stats.jobs)
    grow = min(0.45, 0.08 + unmet / 400) * (1 + amenity_bonus / 40) * growth_bonus
    decay = (0.07 + min(0.12, stats.pollution / 250)) * (2 - growth_bonus)
    return grow, decay


class GrowthEngine:
    """Advances a SimulationState by whole days."""

    def __init__(self, profile: SimulationProfile, rng: random.Random | None = None) -> None:
        self.profile = profile
        self.rng = rng if rng is not None else random.Random()

    def seed(self, seed: int | None) -> None:
        """Reseed the random source for a reproducible replay."""
        self.rng.seed(seed)

    def step(self, state: SimulationState) -> StepReport:
        """Run one day of growth and decay, then refresh stats and money."""
        state.day += 1
        report = StepReport(day=state.day)

        growth_bonus = state.growth_bonus if self.profile.progress_bonus else 1.0
        # Chances use the stats from before this sweep
        stats = state.stats

        for row, col in state.grid.cells():
            kind, level = state.grid.get(row, col)
            if kind not in ZONE_KINDS:
                continue

            if not has_adjacent_road(state.grid, row, col):
                if level > 0 and self.rng.random() < ISOLATED_DECAY_CHANCE:
                    self._change(state, report, "decay", row, col, kind, level, level - 1)
                continue

            grow, decay = self._chances(state, row, col, kind, stats, growth_bonus)
            if level < MAX_LEVEL and self.rng.random() < grow:
                self._change(state, report, "grow", row, col, kind, level, level + 1)
            elif level > 0 and self.rng.random() < decay:
                self._change(state, report, "decay", row, col, kind, level, level - 1)

        state.recompute()

        if state.ledger is not None:
            report.distress = state.ledger.settle(
                state.grid, state.stats, self.rng, report.entries,
            )
            if report.distress:
                state.recompute()
            report.money = state.ledger.money

        report.stats = state.stats
        logger.debug(
            "Day %d: +%d -%d pop=%d jobs=%d happiness=%.1f",
            state.day, report.tiles_grown, report.tiles_decayed,
            state.stats.population, state.stats.jobs, state.stats.happiness,
        )
        return report

    def _chances(
        self,
        state: SimulationState,
        row: int,
        col: int,
        kind: TileKind,
        stats: CityStats,
        growth_bonus: float,
    ) -> tuple[float, float]:
        bonus = amenity_influence(state.grid, row, col, self.profile.amenities).bonus
        if kind == TileKind.RESIDENTIAL:
            jobs_score = nearby_jobs_score(state.grid, row, col)
            return residential_chances(jobs_score, bonus, stats, growth_bonus)
        if kind == TileKind.COMMERCIAL:
            population = nearby_population(state.grid, row, col)
            return commercial_chances(population, bonus, stats, growth_bonus)
        return industrial_chances(bonus, stats, growth_bonus)

    @staticmethod
    def _change(
        state: SimulationState,
        report: StepReport,
        action: str,
        row: int,
        col: int,
        kind: TileKind,
        old_level: int,
        new_level: int,
    ) -> None:
        state.grid.set_level(row, col, new_level)
        if action == "grow":
            report.tiles_grown += 1
        else:
            report.tiles_decayed += 1
        report.entries.append(ChangeEntry(
            action=action,
            row=row,
            col=col,
            kind=kind,
            old_level=old_level,
            new_level=new_level,
        ))
