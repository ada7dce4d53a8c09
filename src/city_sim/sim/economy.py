"""Economy ledger: money balance, construction costs, taxes and distress."""

import logging
import random

from city_sim.sim.grid import Grid
from city_sim.sim.types import ChangeEntry, CityStats, EconomyConfig, TileKind, ZONE_KINDS

logger = logging.getLogger(__name__)


class EconomyLedger:
    """Tracks the city's money balance."""

    def __init__(self, config: EconomyConfig) -> None:
        self.config = config
        self.money = config.starting_money

    def reset(self) -> None:
        self.money = self.config.starting_money

    def daily_income(self, stats: CityStats) -> float:
        """Net money change for one day: taxes minus upkeep plus mood."""
        cfg = self.config
        return (
            stats.population * cfg.population_tax
            + stats.jobs * cfg.job_tax
            - (cfg.base_upkeep + stats.pollution * cfg.pollution_upkeep)
            + (stats.happiness - cfg.happiness_baseline)
        )

    def can_afford(self, kind: TileKind) -> bool:
        return self.money >= self.config.cost_of(kind)

    def charge(self, kind: TileKind) -> float:
        """Debit the construction cost of a kind. Caller checks can_afford first."""
        cost = self.config.cost_of(kind)
        self.money -= cost
        return cost

    def refund(self) -> float:
        """Credit the flat bulldoze refund."""
        self.money += self.config.bulldoze_refund
        return self.config.bulldoze_refund

    def settle(
        self,
        grid: Grid,
        stats: CityStats,
        rng: random.Random,
        entries: list[ChangeEntry] | None = None,
    ) -> bool:
        """Apply one day's income. Returns True if the distress pass ran.

        When the balance drops below the distress threshold every developed
        zone tile independently loses a level with a fixed chance, and the
        city receives a one-off relief payment. Callers must recompute stats
        after a distress pass.
        """
        self.money += self.daily_income(stats)
        if self.money >= self.config.distress_threshold:
            return False

        logger.info("Money at %.1f below distress threshold, applying correction", self.money)
        for row, col in grid.cells():
            kind, level = grid.get(row, col)
            if kind not in ZONE_KINDS or level == 0:
                continue
            if rng.random() < self.config.distress_decay_chance:
                grid.set_level(row, col, level - 1)
                if entries is not None:
                    entries.append(ChangeEntry(
                        action="distress",
                        row=row,
                        col=col,
                        kind=kind,
                        old_level=level,
                        new_level=level - 1,
                    ))
        self.money += self.config.distress_relief
        return True
