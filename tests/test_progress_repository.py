"""Tests for the progress field repository."""

from city_sim.repositories import progress as progress_repo


class TestProgressFields:
    async def test_missing_keys_left_out(self, db_session):
        assert await progress_repo.get_fields(db_session, progress_repo.PROGRESS_KEYS) == {}

    async def test_set_and_get(self, db_session):
        changed = await progress_repo.set_fields(db_session, {"level": 2, "xp": 35.5})
        assert sorted(changed) == ["level", "xp"]
        fields = await progress_repo.get_fields(db_session, progress_repo.PROGRESS_KEYS)
        assert fields == {"level": 2, "xp": 35.5}

    async def test_unchanged_values_not_reported(self, db_session):
        await progress_repo.set_fields(db_session, {"level": 2, "xp": 10})
        changed = await progress_repo.set_fields(db_session, {"level": 2, "xp": 20})
        assert changed == ["xp"]

    async def test_empty_update(self, db_session):
        assert await progress_repo.set_fields(db_session, {}) == []

    async def test_stores_none_and_bool(self, db_session):
        await progress_repo.set_fields(db_session, {"timerRunning": False, "endTime": None})
        fields = await progress_repo.get_fields(db_session, progress_repo.TIMER_KEYS)
        assert fields == {"timerRunning": False, "endTime": None}
