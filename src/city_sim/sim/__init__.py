"""Tile-grid zoning simulation core."""

from city_sim.sim.editing import PaintResult, bulldoze, paint
from city_sim.sim.engine import GrowthEngine
from city_sim.sim.grid import Grid
from city_sim.sim.state import SimulationState
from city_sim.sim.stats import compute_stats
from city_sim.sim.types import (
    CLASSIC_PROFILE,
    EXTENDED_PROFILE,
    CityStats,
    SimulationProfile,
    StepReport,
    TileKind,
    get_profile,
)

__all__ = [
    "CLASSIC_PROFILE",
    "CityStats",
    "EXTENDED_PROFILE",
    "Grid",
    "GrowthEngine",
    "PaintResult",
    "SimulationProfile",
    "SimulationState",
    "StepReport",
    "TileKind",
    "bulldoze",
    "compute_stats",
    "get_profile",
    "paint",
]
