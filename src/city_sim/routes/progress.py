"""Progress endpoints: the player's level and XP."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from city_sim.controller import CityController
from city_sim.database import get_db
from city_sim.dependencies import get_controller
from city_sim.leveling.progress import PlayerProgress, unlocked_tools
from city_sim.repositories import progress as progress_repo
from city_sim.schemas import ProgressResponse, ProgressUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def progress_response(progress: PlayerProgress, controller: CityController) -> ProgressResponse:
    tools = unlocked_tools(controller.profile, progress.level)
    return ProgressResponse(
        level=progress.level,
        xp=progress.xp,
        total_xp=progress.total_xp,
        growth_bonus=controller.state.growth_bonus,
        unlocked_tools=[kind.value for kind in tools],
    )


async def store_progress(
    db: AsyncSession, controller: CityController, progress: PlayerProgress,
) -> None:
    """Persist progress and push it to the city if level or XP changed."""
    changed = await progress_repo.set_fields(db, progress.to_fields())
    if changed:
        controller.apply_progress(progress.level, progress.xp, progress.total_xp)


@router.get("", response_model=ProgressResponse)
async def get_progress(
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> ProgressResponse:
    """Get the stored level and XP."""
    fields = await progress_repo.get_fields(db, progress_repo.PROGRESS_KEYS)
    return progress_response(PlayerProgress.from_fields(fields), controller)


@router.put("", response_model=ProgressResponse)
async def update_progress(
    update: ProgressUpdate,
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> ProgressResponse:
    """
    Store a new level and/or XP.

    The city's growth bonus is recomputed whenever either value changes.
    """
    fields = await progress_repo.get_fields(db, progress_repo.PROGRESS_KEYS)
    progress = PlayerProgress.from_fields(fields)
    if update.level is not None:
        progress.level = update.level
    if update.xp is not None:
        progress.xp = update.xp
    if update.total_xp is not None:
        progress.total_xp = update.total_xp
    await store_progress(db, controller, progress)
    return progress_response(progress, controller)
