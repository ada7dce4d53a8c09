"""Canvas LMS to-do list integration."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://canvas.ucsc.edu"
TODO_PATH = "/api/v1/todo"


class CanvasError(Exception):
    """Raised when the to-do list cannot be fetched."""


@dataclass
class Task:
    """A to-do item, shaped for display next to its XP reward."""

    name: str
    due: str
    points: float
    course: str | None


def _format_due(value: str | None) -> str:
    if not value:
        return "No Date"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def parse_todo_item(item: dict[str, Any]) -> Task:
    """Map one to-do entry from the API to a Task."""
    assignment = item.get("assignment") or {}
    quiz = item.get("quiz") or {}
    return Task(
        name=assignment.get("name") or quiz.get("title") or "Unnamed Task",
        due=_format_due(assignment.get("due_at")),
        points=assignment.get("points_possible") or 0,
        course=item.get("context_name"),
    )


def top_tasks(tasks: list[Task], limit: int = 3) -> list[Task]:
    """The first few tasks, in the order the API returned them."""
    return tasks[:limit]


class CanvasClient:
    """Reads the current user's to-do list with a personal access token."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def fetch_todo(self) -> list[Task]:
        """Fetch and parse the to-do list."""
        url = f"{self._base_url}{TODO_PATH}"
        try:
            response = requests.get(url, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Canvas fetch failed: %s", e)
            raise CanvasError("Invalid token or network error") from e

        if not isinstance(data, list):
            raise CanvasError("Unexpected response from Canvas")
        return [parse_todo_item(item) for item in data if isinstance(item, dict)]
