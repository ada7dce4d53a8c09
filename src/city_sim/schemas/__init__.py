"""Pydantic schemas for the HTTP API."""

from city_sim.schemas.city import (
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
from city_sim.schemas.progress import ProgressResponse, ProgressUpdate
from city_sim.schemas.task import TaskResponse, TokenUpdate
from city_sim.schemas.timer import TimerResponse, TimerResumeRequest, TimerStartRequest

__all__ = [
    "AutoRunRequest",
    "AutoRunResponse",
    "CityMap",
    "CitySnapshot",
    "CityStage",
    "CityStatsResponse",
    "PaintRequest",
    "PaintResponse",
    "ProgressResponse",
    "ProgressUpdate",
    "StepRequest",
    "StepResponse",
    "StepSummary",
    "TaskResponse",
    "TimerResponse",
    "TimerResumeRequest",
    "TimerStartRequest",
    "TokenUpdate",
]
