"""City endpoints: edit the grid, step the simulation, read its state."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from city_sim.controller import CityController
from city_sim.database import get_db
from city_sim.dependencies import get_controller, get_stepper
from city_sim.leveling.progress import unlocked_tools
from city_sim.leveling.stages import render_stage, stored_total_xp
from city_sim.render import legend, render_ascii
from city_sim.repositories import progress as progress_repo
from city_sim.runner import AutoStepper
from city_sim.schemas import (
    AutoRunRequest,
    AutoRunResponse,
    CityMap,
    CitySnapshot,
    CityStage,
    CityStatsResponse,
    PaintRequest,
    PaintResponse,
    StepRequest,
    StepResponse,
    StepSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/city", tags=["city"])


def _stats(controller: CityController) -> CityStatsResponse:
    return CityStatsResponse(**controller.stats.to_dict())


@router.get("", response_model=CitySnapshot)
async def get_city(
    controller: CityController = Depends(get_controller),
    stepper: AutoStepper = Depends(get_stepper),
) -> CitySnapshot:
    """Get the full grid, stats and counters."""
    snapshot = controller.snapshot()
    snapshot["stats"] = _stats(controller)
    tools = unlocked_tools(controller.profile, controller.progress.level)
    return CitySnapshot(
        **snapshot,
        running=stepper.running,
        tools=[kind.value for kind in tools],
    )


@router.get("/stats", response_model=CityStatsResponse)
async def get_stats(controller: CityController = Depends(get_controller)) -> CityStatsResponse:
    """Get the current city-wide statistics."""
    return _stats(controller)


@router.get("/map", response_model=CityMap)
async def get_map(controller: CityController = Depends(get_controller)) -> CityMap:
    """Get a plain-text map of the grid."""
    return CityMap(day=controller.day, map=render_ascii(controller.state.grid), legend=legend())


@router.get("/stage", response_model=CityStage)
async def get_stage(db: AsyncSession = Depends(get_db)) -> CityStage:
    """Get the skyline art earned with the player's total XP."""
    fields = await progress_repo.get_fields(db, progress_repo.PROGRESS_KEYS)
    return CityStage(**render_stage(stored_total_xp(fields)))


@router.post("/paint", response_model=PaintResponse)
async def paint(
    request: PaintRequest,
    controller: CityController = Depends(get_controller),
) -> PaintResponse:
    """
    Paint a tile, or the 3x3 block around it when ``brush`` is set.

    Cells outside the grid are ignored. Unknown or locked tools paint road.
    With the money ledger, cells the city cannot afford are left unchanged
    and counted as rejected.
    """
    result = controller.paint(request.row, request.col, request.tool, request.brush)
    return PaintResponse(
        changed=result.changed,
        rejected=result.rejected,
        spent=result.spent,
        refunded=result.refunded,
        money=controller.money,
        stats=_stats(controller),
    )


@router.post("/step", response_model=StepResponse)
async def step(
    request: StepRequest | None = None,
    controller: CityController = Depends(get_controller),
) -> StepResponse:
    """Advance the simulation by one or more days."""
    days = request.days if request is not None else 1
    reports = controller.step(days)
    return StepResponse(
        day=controller.day,
        money=controller.money,
        stats=_stats(controller),
        days=[
            StepSummary(
                day=r.day,
                tiles_grown=r.tiles_grown,
                tiles_decayed=r.tiles_decayed,
                distress=r.distress,
                money=r.money,
            )
            for r in reports
        ],
    )


@router.post("/reset", response_model=CityStatsResponse)
async def reset(controller: CityController = Depends(get_controller)) -> CityStatsResponse:
    """Clear the grid and return to day 0."""
    controller.reset()
    return _stats(controller)


@router.post("/autorun", response_model=AutoRunResponse)
async def set_autorun(
    request: AutoRunRequest,
    stepper: AutoStepper = Depends(get_stepper),
) -> AutoRunResponse:
    """Start or stop automatic stepping. Repeating a request is harmless."""
    if request.running:
        stepper.start()
    else:
        await stepper.stop()
    return AutoRunResponse(running=stepper.running, interval_seconds=stepper.interval_seconds)


@router.post("/autorun/toggle", response_model=AutoRunResponse)
async def toggle_autorun(stepper: AutoStepper = Depends(get_stepper)) -> AutoRunResponse:
    """Flip automatic stepping on or off."""
    running = await stepper.toggle()
    return AutoRunResponse(running=running, interval_seconds=stepper.interval_seconds)
