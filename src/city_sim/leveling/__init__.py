"""Player leveling: progress, focus timer and city stage art."""

from city_sim.leveling.progress import (
    PlayerProgress,
    award_xp,
    growth_bonus,
    resolve_tool,
    sanitize_progress,
    unlocked_tools,
)
from city_sim.leveling.stages import render_stage, stage_for_xp
from city_sim.leveling.timer import FocusTimer, TimerState, xp_earned, xp_for_seconds

__all__ = [
    "FocusTimer",
    "PlayerProgress",
    "TimerState",
    "award_xp",
    "growth_bonus",
    "render_stage",
    "resolve_tool",
    "sanitize_progress",
    "stage_for_xp",
    "unlocked_tools",
    "xp_earned",
    "xp_for_seconds",
]
