"""Editing surface: paint and bulldoze tiles, single cell or 3x3 brush."""

import logging
from dataclasses import dataclass

from city_sim.sim.state import SimulationState
from city_sim.sim.types import TileKind

logger = logging.getLogger(__name__)

BRUSH_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


@dataclass
class PaintResult:
    """Outcome of one paint call."""

    changed: int = 0
    rejected: int = 0
    spent: float = 0.0
    refunded: float = 0.0


def _paint_one(state: SimulationState, row: int, col: int, kind: TileKind, result: PaintResult) -> None:
    cell = state.grid.get(row, col)
    if cell is None:
        return
    previous, _ = cell
    if previous == kind:
        return

    ledger = state.ledger
    if ledger is not None and kind != TileKind.EMPTY:
        if not ledger.can_afford(kind):
            result.rejected += 1
            return
        result.spent += ledger.charge(kind)

    state.grid.set(row, col, kind)
    result.changed += 1

    if ledger is not None and kind == TileKind.EMPTY:
        result.refunded += ledger.refund()


def paint(
    state: SimulationState,
    row: int,
    col: int,
    kind: TileKind,
    brush: bool = False,
) -> PaintResult:
    """Paint a kind at a cell, or at the 3x3 block centered on it.

    Each cell is handled on its own: unchanged cells are skipped, cells
    outside the grid are skipped, and with an economy each cell is charged
    (or rejected when money is short) and bulldozed cells are refunded.
    Stats are recomputed once for the whole call.
    """
    result = PaintResult()
    offsets = BRUSH_OFFSETS if brush else [(0, 0)]
    for dr, dc in offsets:
        _paint_one(state, row + dr, col + dc, kind, result)

    if result.rejected:
        logger.debug("Rejected %d tile(s) of %s: insufficient funds", result.rejected, kind)
    state.recompute()
    return result


def bulldoze(state: SimulationState, row: int, col: int, brush: bool = False) -> PaintResult:
    """Clear tiles back to empty."""
    return paint(state, row, col, TileKind.EMPTY, brush)
