"""Tests for the economy ledger."""

import pytest

from city_sim.sim.economy import EconomyLedger
from city_sim.sim.grid import Grid
from city_sim.sim.types import CLASSIC_PROFILE, CityStats, EconomyConfig, TileKind


@pytest.fixture
def ledger() -> EconomyLedger:
    return EconomyLedger(EconomyConfig())


class TestIncome:
    def test_starting_money(self, ledger):
        assert ledger.money == 5000

    def test_upkeep_only(self, ledger):
        ledger.settle(Grid(), CityStats(), rng=None)
        assert ledger.money == pytest.approx(4960.0)

    def test_daily_income_formula(self, ledger):
        stats = CityStats(population=100, jobs=40, pollution=10, happiness=60)
        # 35 + 10 - (40 + 11.5) + 10
        assert ledger.daily_income(stats) == pytest.approx(3.5)

    def test_reset(self, ledger):
        ledger.money = 12
        ledger.reset()
        assert ledger.money == 5000


class TestCosts:
    def test_cost_table_is_read_only(self):
        config = EconomyConfig()
        with pytest.raises(TypeError):
            config.construction_costs[TileKind.ROAD] = 0.0
        assert CLASSIC_PROFILE.economy.cost_of(TileKind.ROAD) == 10

    def test_custom_costs_are_copied(self):
        costs = {TileKind.ROAD: 5.0}
        config = EconomyConfig(construction_costs=costs)
        costs[TileKind.ROAD] = 500.0
        assert config.cost_of(TileKind.ROAD) == 5.0

    def test_cost_table(self):
        config = EconomyConfig()
        assert config.cost_of(TileKind.ROAD) == 10
        assert config.cost_of(TileKind.INDUSTRIAL) == 100
        assert config.cost_of(TileKind.EMPTY) == 0

    def test_charge_and_refund(self, ledger):
        assert ledger.charge(TileKind.RESIDENTIAL) == 50
        assert ledger.money == 4950
        assert ledger.refund() == 10
        assert ledger.money == 4960

    def test_can_afford(self, ledger):
        ledger.money = 99
        assert ledger.can_afford(TileKind.COMMERCIAL) is True
        assert ledger.can_afford(TileKind.INDUSTRIAL) is False
        ledger.money = -5
        assert ledger.can_afford(TileKind.EMPTY) is False


class TestDistress:
    def _developed_grid(self):
        grid = Grid()
        grid.set(0, 0, TileKind.RESIDENTIAL)
        grid.set_level(0, 0, 2)
        grid.set(0, 1, TileKind.COMMERCIAL)
        grid.set_level(0, 1, 1)
        grid.set(0, 2, TileKind.INDUSTRIAL)  # undeveloped, no draw
        grid.set(0, 3, TileKind.PARK)
        return grid

    def test_no_distress_above_threshold(self, ledger, scripted):
        rng = scripted()
        ledger.money = -459
        assert ledger.settle(self._developed_grid(), CityStats(), rng) is False
        assert ledger.money == pytest.approx(-499.0)
        assert rng.calls == 0

    def test_distress_decays_and_relieves(self, ledger, scripted):
        grid = self._developed_grid()
        rng = scripted([0.1, 0.3])
        entries = []
        ledger.money = -470
        assert ledger.settle(grid, CityStats(), rng, entries) is True
        assert rng.calls == 2
        assert grid.level_at(0, 0) == 1
        assert grid.level_at(0, 1) == 1
        assert ledger.money == pytest.approx(-510 + 150)
        assert [(e.action, e.row, e.col) for e in entries] == [("distress", 0, 0)]
