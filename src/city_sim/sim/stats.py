"""Stats aggregator: city-wide statistics as a pure function of the grid."""

import numpy as np

from city_sim.sim.grid import Grid
from city_sim.sim.types import (
    CAPACITY_TABLE,
    CityStats,
    SimulationProfile,
    TileKind,
)

INDUSTRY_POLLUTION_PER_LEVEL = 3.0
ROAD_POLLUTION = 0.15

BASE_HAPPINESS = 40.0
JOB_COVERAGE_HAPPINESS = 30.0
POLLUTION_HAPPINESS_FACTOR = 0.7
MAX_POLLUTION_PENALTY = 35.0
MAX_AMENITY_HAPPINESS = 20.0


def amenity_count(grid: Grid, profile: SimulationProfile) -> float:
    """Kind-weighted number of amenity tiles in the whole city."""
    return float(sum(
        weight.count * grid.count(kind)
        for kind, weight in profile.amenities.items()
    ))


def compute_stats(grid: Grid, profile: SimulationProfile) -> CityStats:
    """Recompute population, jobs, pollution and happiness from scratch."""
    caps = CAPACITY_TABLE[grid.kinds, grid.levels]

    population = int(caps[grid.mask(TileKind.RESIDENTIAL)].sum())
    jobs = int(caps[grid.mask(TileKind.COMMERCIAL) | grid.mask(TileKind.INDUSTRIAL)].sum())

    industrial_levels = int(grid.levels[grid.mask(TileKind.INDUSTRIAL)].sum())
    raw_pollution = (
        INDUSTRY_POLLUTION_PER_LEVEL * industrial_levels
        + ROAD_POLLUTION * grid.count(TileKind.ROAD)
    )

    amenities = amenity_count(grid, profile)
    pollution = max(0.0, raw_pollution - amenities * profile.pollution_cleanse_factor)

    job_coverage = 1.0 if population == 0 else min(1.0, jobs / population)
    happiness = (
        BASE_HAPPINESS
        + job_coverage * JOB_COVERAGE_HAPPINESS
        - min(MAX_POLLUTION_PENALTY, pollution * POLLUTION_HAPPINESS_FACTOR)
        + min(MAX_AMENITY_HAPPINESS, amenities * profile.amenity_happiness_factor)
    )

    return CityStats(
        population=population,
        jobs=jobs,
        pollution=float(pollution),
        happiness=float(np.clip(happiness, 0.0, 100.0)),
    )
