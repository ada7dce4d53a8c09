"""Focus timer endpoints. Worked time is converted to XP."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from city_sim.controller import CityController
from city_sim.database import get_db
from city_sim.dependencies import get_controller
from city_sim.leveling.progress import PlayerProgress, award_xp
from city_sim.leveling.timer import FocusTimer, TimerState, xp_earned
from city_sim.repositories import progress as progress_repo
from city_sim.routes.progress import store_progress
from city_sim.schemas import TimerResponse, TimerResumeRequest, TimerStartRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/timer", tags=["timer"])


async def _load_timer(db: AsyncSession) -> FocusTimer:
    fields = await progress_repo.get_fields(db, progress_repo.TIMER_KEYS)
    return FocusTimer(TimerState.from_fields(fields))


async def _save_timer(
    db: AsyncSession,
    controller: CityController,
    timer: FocusTimer,
    worked_before: float,
) -> TimerResponse:
    """Persist the timer and credit XP for the full minutes newly worked."""
    await progress_repo.set_fields(db, timer.state.to_fields())

    xp = xp_earned(worked_before, timer.state.total_worked_seconds)
    if xp > 0:
        fields = await progress_repo.get_fields(db, progress_repo.PROGRESS_KEYS)
        progress = PlayerProgress.from_fields(fields)
        if award_xp(progress, xp):
            logger.info("Level up to %d", progress.level)
        await store_progress(db, controller, progress)

    return TimerResponse(
        running=timer.state.running,
        end_time=timer.state.end_time,
        remaining_seconds=timer.remaining_seconds(),
        total_worked_seconds=timer.state.total_worked_seconds,
        xp_awarded=xp,
    )


@router.get("", response_model=TimerResponse)
async def get_timer(
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> TimerResponse:
    """Get the timer state, completing the session if it has run out."""
    timer = await _load_timer(db)
    worked_before = timer.state.total_worked_seconds
    timer.refresh()
    return await _save_timer(db, controller, timer, worked_before)


@router.post("/start", response_model=TimerResponse)
async def start_timer(
    request: TimerStartRequest,
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> TimerResponse:
    """Start a new focus session."""
    timer = await _load_timer(db)
    timer.start(request.duration_seconds)
    return await _save_timer(db, controller, timer, timer.state.total_worked_seconds)


@router.post("/resume", response_model=TimerResponse)
async def resume_timer(
    request: TimerResumeRequest,
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> TimerResponse:
    """Resume a paused session."""
    timer = await _load_timer(db)
    timer.resume(request.remaining_seconds)
    return await _save_timer(db, controller, timer, timer.state.total_worked_seconds)


@router.post("/pause", response_model=TimerResponse)
async def pause_timer(
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> TimerResponse:
    """Pause the session and bank the time worked."""
    timer = await _load_timer(db)
    worked_before = timer.state.total_worked_seconds
    timer.pause()
    return await _save_timer(db, controller, timer, worked_before)


@router.post("/reset", response_model=TimerResponse)
async def reset_timer(
    db: AsyncSession = Depends(get_db),
    controller: CityController = Depends(get_controller),
) -> TimerResponse:
    """Drop the current session without crediting it."""
    timer = await _load_timer(db)
    timer.reset()
    return await _save_timer(db, controller, timer, timer.state.total_worked_seconds)
