"""Type definitions for the zoning simulation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

import numpy as np

GRID_SIZE = 30
MAX_LEVEL = 3


class TileKind(StrEnum):
    """Kinds of tile that can be painted onto the grid."""

    EMPTY = "empty"
    ROAD = "road"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    PARK = "park"
    PLAZA = "plaza"
    SCHOOL = "school"


# Grid arrays store the position of a kind in this tuple
TILE_KINDS: tuple[TileKind, ...] = tuple(TileKind)
KIND_CODES: dict[TileKind, int] = {kind: i for i, kind in enumerate(TILE_KINDS)}

ZONE_KINDS = frozenset({TileKind.RESIDENTIAL, TileKind.COMMERCIAL, TileKind.INDUSTRIAL})
JOB_KINDS = frozenset({TileKind.COMMERCIAL, TileKind.INDUSTRIAL})

# Population (residential) or jobs (commercial/industrial) per development level
CAPACITY: dict[TileKind, tuple[int, int, int, int]] = {
    TileKind.RESIDENTIAL: (0, 10, 25, 45),
    TileKind.COMMERCIAL: (0, 8, 18, 30),
    TileKind.INDUSTRIAL: (0, 10, 22, 36),
}

# Lookup table indexed by [kind code, level]; non-zone rows are all zero
CAPACITY_TABLE = np.zeros((len(TILE_KINDS), MAX_LEVEL + 1), dtype=np.int64)
for _kind, _caps in CAPACITY.items():
    CAPACITY_TABLE[KIND_CODES[_kind]] = _caps


def is_zone(kind: TileKind) -> bool:
    """Return True for the kinds that carry a development level."""
    return kind in ZONE_KINDS


def capacity(kind: TileKind, level: int) -> int:
    """Population or job capacity of a tile at a development level."""
    caps = CAPACITY.get(kind)
    if caps is None:
        return 0
    return caps[max(0, min(MAX_LEVEL, level))]


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


@dataclass(frozen=True)
class CityStats:
    """City-wide statistics, recomputed wholesale from the grid."""

    population: int = 0
    jobs: int = 0
    pollution: float = 0.0
    happiness: float = 50.0

    @property
    def display_pollution(self) -> int:
        return max(0, _round_half_up(self.pollution))

    @property
    def display_happiness(self) -> int:
        return max(0, min(100, _round_half_up(self.happiness)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "population": self.population,
            "jobs": self.jobs,
            "pollution": self.pollution,
            "happiness": self.happiness,
            "display_pollution": self.display_pollution,
            "display_happiness": self.display_happiness,
        }


@dataclass(frozen=True)
class AmenityWeight:
    """Influence of one amenity kind.

    ``bonus`` and ``cleanse`` are the local base weights used by the spatial
    scorer (divided by distance). ``count`` is the weight of one tile in the
    city-wide amenity count used by the stats aggregator.
    """

    bonus: float
    cleanse: float
    count: float


@dataclass(frozen=True)
class EconomyConfig:
    """Constants for the money ledger."""

    starting_money: float = 5000.0
    population_tax: float = 0.35
    job_tax: float = 0.25
    base_upkeep: float = 40.0
    pollution_upkeep: float = 1.15
    happiness_baseline: float = 50.0

    # Distress correction when the balance sinks too low
    distress_threshold: float = -500.0
    distress_relief: float = 150.0
    distress_decay_chance: float = 0.25

    bulldoze_refund: float = 10.0
    construction_costs: Mapping[TileKind, float] = field(default_factory=lambda: {
        TileKind.ROAD: 10.0,
        TileKind.RESIDENTIAL: 50.0,
        TileKind.COMMERCIAL: 75.0,
        TileKind.INDUSTRIAL: 100.0,
        TileKind.PARK: 40.0,
        TileKind.PLAZA: 60.0,
        TileKind.SCHOOL: 120.0,
    })

    def __post_init__(self) -> None:
        # Profiles are shared process-wide, so the cost table is read-only
        object.__setattr__(self, "construction_costs", MappingProxyType(dict(self.construction_costs)))

    def cost_of(self, kind: TileKind) -> float:
        """Construction cost of a kind; painting empty is free."""
        if kind == TileKind.EMPTY:
            return 0.0
        return self.construction_costs.get(kind, 0.0)


@dataclass(frozen=True)
class SimulationProfile:
    """One edition of the simulation.

    The amenity set and its weights, the economy ledger and the use of the
    player's growth bonus differ between editions; the engine itself is
    shared.
    """

    name: str
    amenities: Mapping[TileKind, AmenityWeight]
    pollution_cleanse_factor: float
    amenity_happiness_factor: float
    economy: EconomyConfig | None = None
    progress_bonus: bool = True
    grid_size: int = GRID_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "amenities", MappingProxyType(dict(self.amenities)))

    @property
    def tile_kinds(self) -> frozenset[TileKind]:
        """Kinds that can be painted in this edition."""
        base = {TileKind.EMPTY, TileKind.ROAD, *ZONE_KINDS}
        return frozenset(base | set(self.amenities))


EXTENDED_PROFILE = SimulationProfile(
    name="extended",
    amenities={
        TileKind.PARK: AmenityWeight(bonus=3.0, cleanse=2.0, count=1.0),
        TileKind.PLAZA: AmenityWeight(bonus=2.0, cleanse=1.5, count=0.8),
        TileKind.SCHOOL: AmenityWeight(bonus=4.0, cleanse=2.5, count=1.2),
    },
    pollution_cleanse_factor=1.1,
    amenity_happiness_factor=0.3,
    economy=None,
    progress_bonus=True,
)

CLASSIC_PROFILE = SimulationProfile(
    name="classic",
    amenities={
        TileKind.PARK: AmenityWeight(bonus=3.0, cleanse=2.0, count=1.0),
    },
    pollution_cleanse_factor=1.2,
    amenity_happiness_factor=0.25,
    economy=EconomyConfig(),
    progress_bonus=False,
)

PROFILES: dict[str, SimulationProfile] = {
    EXTENDED_PROFILE.name: EXTENDED_PROFILE,
    CLASSIC_PROFILE.name: CLASSIC_PROFILE,
}


def get_profile(name: str) -> SimulationProfile:
    """Look up a profile by name, falling back to the extended edition."""
    return PROFILES.get(name.lower(), EXTENDED_PROFILE)


@dataclass
class ChangeEntry:
    """A single development-level change recorded during a step."""

    action: str  # "grow", "decay", "distress"
    row: int
    col: int
    kind: TileKind
    old_level: int
    new_level: int


@dataclass
class StepReport:
    """Structured changelog from one simulation step."""

    day: int
    stats: CityStats = field(default_factory=CityStats)
    entries: list[ChangeEntry] = field(default_factory=list)

    # Summary counters
    tiles_grown: int = 0
    tiles_decayed: int = 0
    distress: bool = False
    money: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "day": self.day,
            "stats": self.stats.to_dict(),
            "summary": {
                "tiles_grown": self.tiles_grown,
                "tiles_decayed": self.tiles_decayed,
                "distress": self.distress,
                "money": self.money,
            },
            "entries": [
                {
                    "action": e.action,
                    "row": e.row,
                    "col": e.col,
                    "kind": e.kind.value,
                    "old_level": e.old_level,
                    "new_level": e.new_level,
                }
                for e in self.entries
            ],
        }
