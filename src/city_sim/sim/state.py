"""Simulation state shared by the engine, the ledger and the editing surface."""

from dataclasses import dataclass, field

from city_sim.sim.economy import EconomyLedger
from city_sim.sim.grid import Grid
from city_sim.sim.stats import compute_stats
from city_sim.sim.types import CityStats, SimulationProfile


@dataclass
class SimulationState:
    """Everything a step or an edit reads and writes.

    The grid is created empty at the profile's size and the ledger exists
    only when the profile carries an economy.
    """

    profile: SimulationProfile
    stats: CityStats = field(default_factory=CityStats)
    day: int = 0
    growth_bonus: float = 1.0
    grid: Grid = field(init=False)
    ledger: EconomyLedger | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.grid = Grid(self.profile.grid_size)
        if self.profile.economy is not None:
            self.ledger = EconomyLedger(self.profile.economy)

    @property
    def money(self) -> float | None:
        return self.ledger.money if self.ledger is not None else None

    def recompute(self) -> CityStats:
        """Replace the cached stats with a full recompute of the grid."""
        self.stats = compute_stats(self.grid, self.profile)
        return self.stats

    def reset(self) -> None:
        """Empty the grid, rewind the day counter and restore starting money."""
        self.grid.clear()
        self.day = 0
        if self.ledger is not None:
            self.ledger.reset()
        self.recompute()
