"""Task Store — thin data-access object over the tasks table.

Invariants:
    - No validation: direct pass-through to the database
    - Every write commits immediately (one statement, one transaction)
    - Storage errors propagate unchanged; DatabaseSessionManager maps them

Design Decisions:
    - Core UPDATE/DELETE statements over load-then-mutate: delete of a missing id is a no-op
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import TaskId
from task_api.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Select-all, select-by-id, insert, update-by-id, delete-by-id."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def select_all(self) -> list[Task]:
        result = await self.db.execute(select(Task).order_by(Task.id))
        return list(result.scalars().all())

    async def select_by_id(self, task_id: TaskId) -> Task | None:
        result = await self.db.execute(
            select(Task).where(Task.id == task_id),
        )
        return result.scalar_one_or_none()

    async def create(self, fields: dict) -> Task:
        """Insert a task and return it with its assigned id."""
        task = Task(**fields)
        self.db.add(task)
        await self.db.commit()
        await self.db.refresh(task)
        logger.debug(f"Inserted task {task.id}", extra={"task_id": task.id})
        return task

    async def update(self, task_id: TaskId, fields: dict) -> None:
        if not fields:
            return
        await self.db.execute(
            update(Task).where(Task.id == task_id).values(**fields),
        )
        await self.db.commit()

    async def delete(self, task_id: TaskId) -> None:
        await self.db.execute(delete(Task).where(Task.id == task_id))
        await self.db.commit()
