"""Focus timer schemas."""

from pydantic import BaseModel, Field


class TimerStartRequest(BaseModel):
    duration_seconds: float = Field(default=25 * 60, ge=0, le=24 * 60 * 60)


class TimerResumeRequest(BaseModel):
    remaining_seconds: float | None = Field(default=None, ge=0)


class TimerResponse(BaseModel):
    """Current timer state."""

    running: bool
    end_time: float | None = None
    remaining_seconds: int
    total_worked_seconds: float
    xp_awarded: int = 0
