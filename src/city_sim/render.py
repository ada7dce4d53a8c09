"""Rendering helpers: an RGB raster of the grid and a plain-text map.

The simulation never draws by itself. The text map is served at
`GET /city/map`; `render_raster` is a library hook for hosts that draw the
city themselves, typically from a `CityController` listener.
"""

import numpy as np
from numpy.typing import NDArray

from city_sim.sim.grid import Grid
from city_sim.sim.types import TILE_KINDS, TileKind, is_zone

COLORS: dict[TileKind, str] = {
    TileKind.EMPTY: "#0b1020",
    TileKind.ROAD: "#6b7280",
    TileKind.RESIDENTIAL: "#22c55e",
    TileKind.COMMERCIAL: "#60a5fa",
    TileKind.INDUSTRIAL: "#f59e0b",
    TileKind.PARK: "#16a34a",
    TileKind.PLAZA: "#a855f7",
    TileKind.SCHOOL: "#f97316",
}

GLYPHS: dict[TileKind, str] = {
    TileKind.EMPTY: ".",
    TileKind.ROAD: "#",
    TileKind.RESIDENTIAL: "r",
    TileKind.COMMERCIAL: "c",
    TileKind.INDUSTRIAL: "i",
    TileKind.PARK: "p",
    TileKind.PLAZA: "z",
    TileKind.SCHOOL: "s",
}

GRID_LINE_COLOR = (34, 50, 99)
GRID_LINE_ALPHA = 0.55
DEV_MARK_COLOR = (255, 255, 255)
DEV_MARK_ALPHA = 0.75
DEV_MARK_SIZE = 4


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


# Palette indexed by kind code, for vectorized lookup
PALETTE = np.array([hex_to_rgb(COLORS[kind]) for kind in TILE_KINDS], dtype=np.uint8)


def _blend(region: NDArray[np.uint8], color: tuple[int, int, int], alpha: float) -> None:
    blended = region * (1 - alpha) + np.array(color) * alpha
    region[...] = np.round(blended).astype(np.uint8)


def render_raster(grid: Grid, cell_size: int = 16) -> NDArray[np.uint8]:
    """Draw the grid as an (H, W, 3) uint8 image.

    Each cell is filled with its kind's color; developed zones get one light
    mark per level along the bottom edge, and thin lines separate the cells.
    """
    image = np.repeat(np.repeat(PALETTE[grid.kinds], cell_size, axis=0), cell_size, axis=1)

    half = DEV_MARK_SIZE // 2
    for row, col in grid.cells():
        kind, level = grid.get(row, col)
        if not is_zone(kind) or level == 0:
            continue
        y = row * cell_size + cell_size - 7
        for i in range(level):
            x = col * cell_size + 6 + i * 8
            y0, y1 = max(0, y - half), min(image.shape[0], y + half)
            x0, x1 = max(0, x - half), min(image.shape[1], x + half)
            if y0 < y1 and x0 < x1:
                _blend(image[y0:y1, x0:x1], DEV_MARK_COLOR, DEV_MARK_ALPHA)

    # The closing border lands on the last pixel row and column
    last = image.shape[0] - 1
    for i in range(grid.size + 1):
        offset = min(i * cell_size, last)
        _blend(image[offset, :], GRID_LINE_COLOR, GRID_LINE_ALPHA)
        _blend(image[:, offset], GRID_LINE_COLOR, GRID_LINE_ALPHA)

    return image


def render_ascii(grid: Grid) -> str:
    """One character per cell; developed zones show their level digit."""
    lines = []
    for row in range(grid.size):
        chars = []
        for col in range(grid.size):
            kind, level = grid.get(row, col)
            chars.append(str(level) if is_zone(kind) and level > 0 else GLYPHS[kind])
        lines.append("".join(chars))
    return "\n".join(lines)


def legend() -> dict[str, str]:
    """Glyph for each kind, in kind order."""
    return {kind.value: GLYPHS[kind] for kind in TILE_KINDS}
