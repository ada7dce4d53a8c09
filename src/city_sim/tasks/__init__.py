"""External task sources."""

from city_sim.tasks.canvas import CanvasClient, CanvasError, Task, top_tasks

__all__ = ["CanvasClient", "CanvasError", "Task", "top_tasks"]
