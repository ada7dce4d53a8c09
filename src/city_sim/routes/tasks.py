"""Task endpoints: the player's Canvas to-do list."""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from city_sim.config import settings
from city_sim.database import get_db
from city_sim.repositories import progress as progress_repo
from city_sim.schemas import TaskResponse, TokenUpdate
from city_sim.tasks.canvas import CanvasClient, CanvasError, top_tasks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.put("/token", status_code=status.HTTP_204_NO_CONTENT)
async def save_token(update: TokenUpdate, db: AsyncSession = Depends(get_db)) -> None:
    """Store the Canvas access token."""
    await progress_repo.set_fields(db, {progress_repo.TOKEN_KEY: update.token.strip()})


@router.get("", response_model=list[TaskResponse])
async def list_tasks(db: AsyncSession = Depends(get_db)) -> list[TaskResponse]:
    """List the top three to-do items from Canvas."""
    fields = await progress_repo.get_fields(db, [progress_repo.TOKEN_KEY])
    token = fields.get(progress_repo.TOKEN_KEY)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No Canvas token stored",
        )

    client = CanvasClient(
        token,
        base_url=settings.canvas_base_url,
        timeout=settings.canvas_timeout_seconds,
    )
    loop = asyncio.get_running_loop()
    try:
        tasks = await loop.run_in_executor(None, client.fetch_todo)
    except CanvasError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return [TaskResponse(**vars(task)) for task in top_tasks(tasks)]
