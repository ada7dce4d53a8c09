"""Tests for player progress, growth bonus and tool unlocks."""

import math

import pytest

from city_sim.leveling.progress import (
    PlayerProgress,
    award_xp,
    growth_bonus,
    resolve_tool,
    sanitize_progress,
    unlocked_tools,
)
from city_sim.leveling.timer import xp_for_seconds
from city_sim.sim.types import CLASSIC_PROFILE, EXTENDED_PROFILE, TileKind


class TestGrowthBonus:
    def test_level_one(self):
        assert growth_bonus(1, 0) == pytest.approx(1.03)

    def test_level_and_xp(self):
        assert growth_bonus(2, 50) == pytest.approx(1.085)

    def test_xp_progress_saturates(self):
        assert growth_bonus(1, 250) == pytest.approx(1.08)

    def test_capped(self):
        assert growth_bonus(100, 100) == pytest.approx(1.6)

    def test_garbage_inputs(self):
        assert growth_bonus("x", None) == pytest.approx(1.03)
        assert growth_bonus(math.nan, math.inf) == pytest.approx(1.03)


class TestSanitize:
    @pytest.mark.parametrize(
        "level,xp,expected",
        [
            (3, 40, (3, 40)),
            (None, None, (1, 0)),
            (0, -5, (1, 0)),
            (True, False, (1, 0)),
            ("4", "10", (1, 0)),
            (2.0, 12.5, (2, 12.5)),
        ],
    )
    def test_sanitize(self, level, xp, expected):
        assert sanitize_progress(level, xp) == expected

    def test_from_fields_defaults_total_to_xp(self):
        progress = PlayerProgress.from_fields({"level": 2, "xp": 30})
        assert progress == PlayerProgress(level=2, xp=30, total_xp=30)

    def test_to_fields(self):
        assert PlayerProgress(3, 10, 210).to_fields() == {"level": 3, "xp": 10, "totalXp": 210}


class TestAwardXp:
    def test_accumulates(self):
        progress = PlayerProgress()
        assert award_xp(progress, 30) is False
        assert progress.xp == 30
        assert progress.total_xp == 30

    def test_level_up_resets_bar(self):
        progress = PlayerProgress(level=1, xp=96, total_xp=96)
        assert award_xp(progress, 4) is True
        assert progress.level == 2
        assert progress.xp == 0
        assert progress.total_xp == 100

    def test_level_up_carries_remainder(self):
        progress = PlayerProgress(level=1, xp=80, total_xp=80)
        assert award_xp(progress, xp_for_seconds(25 * 60)) is True
        assert progress == PlayerProgress(level=2, xp=30, total_xp=130)

    def test_several_levels_in_one_award(self):
        progress = PlayerProgress(level=3, xp=50, total_xp=250)
        assert award_xp(progress, 260) is True
        assert progress.level == 6
        assert progress.xp == 10
        assert progress.total_xp == 510

    def test_non_positive_amount(self):
        progress = PlayerProgress(xp=10, total_xp=10)
        assert award_xp(progress, 0) is False
        assert progress.xp == 10


class TestTools:
    def test_level_one_tools(self):
        tools = unlocked_tools(EXTENDED_PROFILE, 1)
        assert tools == [TileKind.EMPTY, TileKind.ROAD, TileKind.RESIDENTIAL]

    def test_all_tools_at_level_five(self):
        assert set(unlocked_tools(EXTENDED_PROFILE, 5)) == set(TileKind)

    def test_classic_has_no_locks(self):
        tools = unlocked_tools(CLASSIC_PROFILE, 1)
        assert TileKind.INDUSTRIAL in tools
        assert TileKind.PARK in tools
        assert TileKind.SCHOOL not in tools

    def test_aliases(self):
        assert resolve_tool("res", EXTENDED_PROFILE, 5) == TileKind.RESIDENTIAL
        assert resolve_tool(" IND ", EXTENDED_PROFILE, 5) == TileKind.INDUSTRIAL
        assert resolve_tool("plaza", EXTENDED_PROFILE, 5) == TileKind.PLAZA

    def test_unknown_tool_paints_road(self):
        assert resolve_tool("volcano", EXTENDED_PROFILE, 5) == TileKind.ROAD

    def test_locked_tool_paints_road(self):
        assert resolve_tool("school", EXTENDED_PROFILE, 4) == TileKind.ROAD
        assert resolve_tool("school", EXTENDED_PROFILE, 5) == TileKind.SCHOOL

    def test_tool_outside_profile_paints_road(self):
        assert resolve_tool("plaza", CLASSIC_PROFILE) == TileKind.ROAD
        assert resolve_tool("com", CLASSIC_PROFILE) == TileKind.COMMERCIAL
