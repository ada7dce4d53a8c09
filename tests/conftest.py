"""Pytest configuration and fixtures for City Sim tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import city_sim.models  # noqa: F401  (registers tables on Base.metadata)
from city_sim.app import app
from city_sim.controller import CityController
from city_sim.database import Base, get_db
from city_sim.dependencies import get_controller, get_stepper
from city_sim.runner import AutoStepper
from city_sim.sim.state import SimulationState
from city_sim.sim.types import CLASSIC_PROFILE, EXTENDED_PROFILE, TileKind

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class ScriptedRandom:
    """Stand-in random source that replays a fixed list of draws.

    Once the script runs out it returns a value that never passes a chance
    check, and ``calls`` counts every draw taken.
    """

    def __init__(self, draws: list[float] | None = None, default: float = 0.999999) -> None:
        self._draws = list(draws or [])
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self._draws:
            return self._draws.pop(0)
        return self.default

    def seed(self, value=None) -> None:
        pass


def _place(state: SimulationState, cells: dict[tuple[int, int], tuple[TileKind, int]]) -> SimulationState:
    """Set kinds and levels directly on the grid, then recompute stats."""
    for (row, col), (kind, level) in cells.items():
        state.grid.set(row, col, kind)
        state.grid.set_level(row, col, level)
    state.recompute()
    return state


@pytest.fixture
def place():
    """Helper that puts (kind, level) pairs on a state's grid."""
    return _place


@pytest.fixture
def scripted():
    """Factory for a ScriptedRandom with the given draws."""
    return ScriptedRandom


@pytest.fixture
def extended_state() -> SimulationState:
    state = SimulationState(EXTENDED_PROFILE)
    state.recompute()
    return state


@pytest.fixture
def classic_state() -> SimulationState:
    state = SimulationState(CLASSIC_PROFILE)
    state.recompute()
    return state


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def api_controller() -> CityController:
    return CityController(EXTENDED_PROFILE, seed=7)


@pytest.fixture
def api_stepper(api_controller) -> AutoStepper:
    return AutoStepper(api_controller, interval_seconds=0.01)


@pytest_asyncio.fixture
async def client(db_engine, api_controller, api_stepper) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with test database and a fresh city."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_controller] = lambda: api_controller
    app.dependency_overrides[get_stepper] = lambda: api_stepper

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await api_stepper.stop()
