"""Auto-stepper: advances the city one day per tick until stopped."""

import asyncio
import logging

from city_sim.controller import CityController

logger = logging.getLogger(__name__)


class AutoStepper:
    """Interval trigger with a single running flag.

    ``start`` and ``stop`` are idempotent: a second start never creates a
    second interval task. Steps are synchronous, so cancelling the task can
    only happen between steps.
    """

    def __init__(self, controller: CityController, interval_seconds: float = 0.35) -> None:
        self.controller = controller
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Begin auto-stepping. Returns False if it was already running."""
        if self.running:
            return False
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())
        logger.info("Auto-step started (every %.2fs)", self.interval_seconds)
        return True

    async def stop(self) -> bool:
        """Stop auto-stepping. Returns False if it was not running."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return False
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Auto-step stopped at day %d", self.controller.day)
        return True

    async def toggle(self) -> bool:
        """Flip between running and stopped. Returns the new running state."""
        if self.running:
            await self.stop()
        else:
            self.start()
        return self.running

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.controller.step()
            except Exception:
                logger.exception("Error in auto-step loop")
