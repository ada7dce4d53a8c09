"""Shared dependencies for the HTTP API."""

from city_sim.config import settings
from city_sim.controller import CityController
from city_sim.runner import AutoStepper
from city_sim.sim.types import get_profile

# Lazily created so importing the app has no side effects
_controller: CityController | None = None
_stepper: AutoStepper | None = None


def get_controller() -> CityController:
    """The process-wide city controller."""
    global _controller
    if _controller is None:
        _controller = CityController(get_profile(settings.profile), seed=settings.seed)
    return _controller


def get_stepper() -> AutoStepper:
    """The auto-stepper driving the process-wide controller."""
    global _stepper
    if _stepper is None:
        _stepper = AutoStepper(get_controller(), settings.tick_interval_seconds)
    return _stepper
