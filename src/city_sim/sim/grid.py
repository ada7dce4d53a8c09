"""Grid store: two parallel N x N arrays of tile kind and development level."""

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from city_sim.sim.types import GRID_SIZE, KIND_CODES, MAX_LEVEL, TILE_KINDS, TileKind, is_zone

EMPTY_CODE = KIND_CODES[TileKind.EMPTY]


class Grid:
    """Fixed-size tile grid indexed by (row, col).

    Out-of-bounds coordinates are ignored by every mutator and make ``get``
    return None; nothing here raises on a bad coordinate.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        self.size = size
        self.kinds: NDArray[np.uint8] = np.full((size, size), EMPTY_CODE, dtype=np.uint8)
        self.levels: NDArray[np.uint8] = np.zeros((size, size), dtype=np.uint8)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> tuple[TileKind, int] | None:
        """Return (kind, level) for a cell, or None when out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return TILE_KINDS[self.kinds[row, col]], int(self.levels[row, col])

    def kind_at(self, row: int, col: int) -> TileKind | None:
        if not self.in_bounds(row, col):
            return None
        return TILE_KINDS[self.kinds[row, col]]

    def level_at(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            return 0
        return int(self.levels[row, col])

    def set(self, row: int, col: int, kind: TileKind) -> bool:
        """Change a cell's kind. Returns True if the cell changed.

        Any change of kind leaves the new tile undeveloped.
        """
        if not self.in_bounds(row, col):
            return False
        code = KIND_CODES[kind]
        if self.kinds[row, col] == code:
            return False
        self.kinds[row, col] = code
        self.levels[row, col] = 0
        return True

    def set_level(self, row: int, col: int, level: int) -> None:
        """Set the development level, clamped to [0, 3]; non-zone cells stay at 0."""
        if not self.in_bounds(row, col):
            return
        if not is_zone(TILE_KINDS[self.kinds[row, col]]):
            return
        self.levels[row, col] = max(0, min(MAX_LEVEL, int(level)))

    def clear(self) -> None:
        """Reset every cell to empty and undeveloped."""
        self.kinds.fill(EMPTY_CODE)
        self.levels.fill(0)

    def copy(self) -> "Grid":
        clone = Grid(self.size)
        clone.kinds = self.kinds.copy()
        clone.levels = self.levels.copy()
        return clone

    def cells(self) -> Iterator[tuple[int, int]]:
        """Iterate coordinates in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def mask(self, kind: TileKind) -> NDArray[np.bool_]:
        """Boolean mask of the cells holding a kind."""
        return self.kinds == KIND_CODES[kind]

    def count(self, kind: TileKind) -> int:
        return int(np.count_nonzero(self.mask(kind)))

    def to_lists(self) -> tuple[list[list[str]], list[list[int]]]:
        """Plain nested lists of kind names and levels (for serialization)."""
        kinds = [[TILE_KINDS[code].value for code in row] for row in self.kinds]
        return kinds, self.levels.astype(int).tolist()
