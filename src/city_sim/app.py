"""FastAPI application entry point."""

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from city_sim.config import settings
from city_sim.database import create_tables, get_session_factory
from city_sim.dependencies import get_controller, get_stepper
from city_sim.repositories import progress as progress_repo
from city_sim.routes import city_router, progress_router, tasks_router, timer_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables, load stored progress into the city, manage auto-stepping."""
    await create_tables()
    controller = get_controller()
    async with get_session_factory()() as db:
        fields = await progress_repo.get_fields(db, progress_repo.PROGRESS_KEYS)
    controller.apply_progress(fields.get("level"), fields.get("xp"), fields.get("totalXp"))

    stepper = get_stepper()
    if settings.autorun_on_start:
        stepper.start()
    yield
    await stepper.stop()


app = FastAPI(
    title="City Sim API",
    description="Tile-grid zoning simulation of a small city",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(city_router)
app.include_router(progress_router)
app.include_router(timer_router)
app.include_router(tasks_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "city-sim"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors and return a consistent JSON body."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url}: {exc}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )
