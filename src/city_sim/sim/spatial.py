"""Spatial scorer: read-only neighborhood queries over the grid.

Every function is O(window) and is called once per zoned tile per step.
"""

from collections.abc import Mapping
from typing import NamedTuple

from city_sim.sim.grid import Grid
from city_sim.sim.types import CAPACITY, JOB_KINDS, AmenityWeight, TileKind

JOBS_RADIUS = 3
AMENITY_RADIUS = 2


class AmenityInfluence(NamedTuple):
    """Accumulated amenity effect around a tile."""

    bonus: float
    cleanse: float


def neighbors4(grid: Grid, row: int, col: int) -> list[tuple[int, int]]:
    """Orthogonal neighbors that lie inside the grid."""
    candidates = [(row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)]
    return [(r, c) for r, c in candidates if grid.in_bounds(r, c)]


def neighbors8(grid: Grid, row: int, col: int) -> list[tuple[int, int]]:
    """All surrounding neighbors that lie inside the grid."""
    out = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            if grid.in_bounds(row + dr, col + dc):
                out.append((row + dr, col + dc))
    return out


def has_adjacent_road(grid: Grid, row: int, col: int) -> bool:
    """True if any orthogonal neighbor is a road."""
    return any(grid.kind_at(r, c) == TileKind.ROAD for r, c in neighbors4(grid, row, col))


def nearby_jobs_score(grid: Grid, row: int, col: int) -> float:
    """Distance-weighted job capacity of developed commercial/industrial tiles.

    Each tile within Manhattan distance 3 contributes capacity / max(1, d).
    """
    score = 0.0
    for dr in range(-JOBS_RADIUS, JOBS_RADIUS + 1):
        for dc in range(-JOBS_RADIUS, JOBS_RADIUS + 1):
            d = abs(dr) + abs(dc)
            if d > JOBS_RADIUS:
                continue
            cell = grid.get(row + dr, col + dc)
            if cell is None:
                continue
            kind, level = cell
            if kind in JOB_KINDS and level > 0:
                score += CAPACITY[kind][level] / max(1, d)
    return score


def nearby_population(grid: Grid, row: int, col: int) -> int:
    """Residential capacity of the 8 surrounding tiles."""
    total = 0
    for r, c in neighbors8(grid, row, col):
        kind, level = grid.get(r, c)
        if kind == TileKind.RESIDENTIAL:
            total += CAPACITY[kind][level]
    return total


def amenity_influence(
    grid: Grid,
    row: int,
    col: int,
    amenities: Mapping[TileKind, AmenityWeight],
) -> AmenityInfluence:
    """Happiness bonus and pollution cleanse from amenities in the 5x5 window."""
    bonus = 0.0
    cleanse = 0.0
    for dr in range(-AMENITY_RADIUS, AMENITY_RADIUS + 1):
        for dc in range(-AMENITY_RADIUS, AMENITY_RADIUS + 1):
            kind = grid.kind_at(row + dr, col + dc)
            weight = amenities.get(kind) if kind is not None else None
            if weight is None:
                continue
            d = max(1, abs(dr) + abs(dc))
            bonus += weight.bonus / d
            cleanse += weight.cleanse / d
    return AmenityInfluence(bonus, cleanse)
