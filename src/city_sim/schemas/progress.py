"""Progress schemas - player level and XP."""

from pydantic import BaseModel, Field


class ProgressUpdate(BaseModel):
    """Request model for storing player progress."""

    level: int | None = Field(default=None, ge=1)
    xp: float | None = Field(default=None, ge=0)
    total_xp: float | None = Field(default=None, ge=0)


class ProgressResponse(BaseModel):
    """Stored player progress and the growth bonus derived from it."""

    level: int
    xp: float
    total_xp: float
    growth_bonus: float
    unlocked_tools: list[str]
