"""Focus timer: a countdown whose worked time feeds the player's XP."""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

WORK_XP_PER_MINUTE = 2
DEFAULT_SESSION_SECONDS = 25 * 60


def xp_for_seconds(seconds: float) -> int:
    """XP earned for worked time: a fixed amount per full minute."""
    return int(max(0, seconds) // 60) * WORK_XP_PER_MINUTE


def xp_earned(worked_before: float, worked_after: float) -> int:
    """XP for the full minutes the worked total crossed between two readings.

    Partial minutes carry over to the next reading instead of being lost.
    """
    return max(0, xp_for_seconds(worked_after) - xp_for_seconds(worked_before))


@dataclass
class TimerState:
    """Flat timer fields, as kept by the persistence layer."""

    running: bool = False
    end_time: float | None = None
    remaining_seconds: int | None = None
    start_time: float | None = None
    active_duration_seconds: float | None = None
    total_worked_seconds: float = 0

    def to_fields(self) -> dict[str, Any]:
        return {
            "timerRunning": self.running,
            "endTime": self.end_time,
            "remainingSeconds": self.remaining_seconds,
            "startTime": self.start_time,
            "activeDurationSeconds": self.active_duration_seconds,
            "totalWorkedSeconds": self.total_worked_seconds,
        }

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "TimerState":
        return cls(
            running=bool(fields.get("timerRunning", False)),
            end_time=fields.get("endTime"),
            remaining_seconds=fields.get("remainingSeconds"),
            start_time=fields.get("startTime"),
            active_duration_seconds=fields.get("activeDurationSeconds"),
            total_worked_seconds=fields.get("totalWorkedSeconds") or 0,
        )


class FocusTimer:
    """Start/pause/resume/reset countdown that tracks total worked time.

    Times are epoch seconds from an injectable clock. Methods that finish a
    stretch of work return the number of seconds credited.
    """

    def __init__(
        self,
        state: TimerState | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.state = state if state is not None else TimerState()
        self._clock = clock

    def _begin(self, duration_seconds: float) -> None:
        now = self._clock()
        duration = max(0, duration_seconds)
        self.state.running = True
        self.state.end_time = now + duration
        self.state.remaining_seconds = None
        self.state.start_time = now
        self.state.active_duration_seconds = duration

    def _idle(self, remaining: int | None) -> None:
        self.state.running = False
        self.state.end_time = None
        self.state.remaining_seconds = remaining
        self.state.start_time = None
        self.state.active_duration_seconds = None

    def start(self, duration_seconds: float = DEFAULT_SESSION_SECONDS) -> None:
        self._begin(duration_seconds)

    def resume(self, remaining_seconds: float | None = None) -> None:
        """Continue a paused session, by default from the stored remainder."""
        if remaining_seconds is None:
            remaining_seconds = self.state.remaining_seconds or 0
        self._begin(remaining_seconds)

    def pause(self) -> float:
        """Stop the countdown and bank the time worked so far."""
        now = self._clock()
        start = self.state.start_time if self.state.start_time is not None else now
        active = self.state.active_duration_seconds or 0
        elapsed = min(active, max(0, math.floor(now - start)))
        self.state.total_worked_seconds += elapsed

        end = self.state.end_time
        remaining = max(0, math.ceil(end - now)) if end else 0
        self._idle(remaining)
        return elapsed

    def reset(self) -> None:
        """Drop the current session without crediting it."""
        self._idle(None)

    def complete(self) -> float:
        """Finish the session and credit its whole duration."""
        credited = self.state.active_duration_seconds or 0
        self.state.total_worked_seconds += credited
        self._idle(0)
        return credited

    def refresh(self) -> float:
        """Complete the session if its end time has passed."""
        if not self.state.running or not self.state.end_time:
            return 0
        if self.state.end_time <= self._clock():
            return self.complete()
        return 0

    def remaining_seconds(self) -> int:
        if self.state.running and self.state.end_time is not None:
            return max(0, math.ceil(self.state.end_time - self._clock()))
        return self.state.remaining_seconds or 0
