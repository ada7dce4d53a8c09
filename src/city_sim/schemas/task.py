"""Task schemas - Canvas to-do items."""

from pydantic import BaseModel, Field


class TokenUpdate(BaseModel):
    token: str = Field(..., min_length=1)


class TaskResponse(BaseModel):
    """A to-do item and its XP reward."""

    name: str
    due: str
    points: float
    course: str | None = None
