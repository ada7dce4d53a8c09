"""City schemas - grid edits, steps and snapshots."""

from pydantic import BaseModel, Field


class CityStatsResponse(BaseModel):
    """City-wide statistics."""

    population: int
    jobs: int
    pollution: float
    happiness: float
    display_pollution: int
    display_happiness: int


class PaintRequest(BaseModel):
    """Request model for painting a tile (or a 3x3 block)."""

    row: int
    col: int
    tool: str = Field(..., min_length=1, max_length=32, description="Tile kind or short tool name")
    brush: bool = Field(default=False, description="Paint the 3x3 block centered on the cell")


class PaintResponse(BaseModel):
    """Result of a paint request."""

    changed: int
    rejected: int
    spent: float
    refunded: float
    money: float | None = None
    stats: CityStatsResponse


class StepRequest(BaseModel):
    """Request model for advancing the simulation."""

    days: int = Field(default=1, ge=1, le=365)


class StepSummary(BaseModel):
    """Summary of one simulated day."""

    day: int
    tiles_grown: int
    tiles_decayed: int
    distress: bool
    money: float | None = None


class StepResponse(BaseModel):
    """Result of a step request."""

    day: int
    money: float | None = None
    stats: CityStatsResponse
    days: list[StepSummary]


class AutoRunRequest(BaseModel):
    """Turn auto-stepping on or off."""

    running: bool


class AutoRunResponse(BaseModel):
    running: bool
    interval_seconds: float


class CitySnapshot(BaseModel):
    """Everything a renderer needs to draw the city."""

    profile: str
    size: int
    day: int
    money: float | None = None
    growth_bonus: float
    running: bool
    stats: CityStatsResponse
    kinds: list[list[str]]
    levels: list[list[int]]
    tools: list[str]


class CityMap(BaseModel):
    """Plain-text map of the grid."""

    day: int
    map: str
    legend: dict[str, str]


class CityStage(BaseModel):
    """Skyline art for the player's total XP."""

    stage: int
    label: str
    art: str
    caption: str
    xp_caption: str
