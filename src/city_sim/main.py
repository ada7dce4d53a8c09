"""Headless entry point: run the city on a timer and log each day."""

import asyncio
import logging
import signal
import sys

from city_sim.config import settings
from city_sim.controller import CityController
from city_sim.runner import AutoStepper
from city_sim.sim.types import get_profile


def setup_logging() -> None:
    """Configure logging for the simulator."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def log_day(controller: CityController) -> None:
    stats = controller.stats
    logging.getLogger(__name__).info(
        "Day %d | pop %d | jobs %d | pollution %d | happiness %d%s",
        controller.day,
        stats.population,
        stats.jobs,
        stats.display_pollution,
        stats.display_happiness,
        f" | money {controller.money:.0f}" if controller.money is not None else "",
    )


async def main() -> None:
    """Run the simulator until SIGINT/SIGTERM."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("City Sim starting (profile=%s, seed=%s)...", settings.profile, settings.seed)

    controller = CityController(get_profile(settings.profile), seed=settings.seed)
    controller.add_listener(log_day)
    stepper = AutoStepper(controller, settings.tick_interval_seconds)

    shutdown = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, shutdown.set)

    stepper.start()
    await shutdown.wait()
    logger.info("Shutdown signal received")
    await stepper.stop()


def run() -> None:
    """Entry point for the simulator."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
