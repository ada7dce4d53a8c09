"""API routes for City Sim."""

from city_sim.routes.city import router as city_router
from city_sim.routes.progress import router as progress_router
from city_sim.routes.tasks import router as tasks_router
from city_sim.routes.timer import router as timer_router

__all__ = [
    "city_router",
    "progress_router",
    "tasks_router",
    "timer_router",
]
