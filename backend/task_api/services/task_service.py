"""Task Service — business rules on top of the task store.

Invariants:
    - create_task stamps registration_date with the current UTC time
    - update_task raises TaskNotFoundError when the task is absent
    - update_task never changes id or registration_date
    - delete_task performs no existence check (missing id is a silent no-op)

Design Decisions:
    - Pure rules live in core/task_records.py; this class only sequences IO around them
    - Clock injectable for deterministic tests
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from task_api.core.domain_types import TaskId
from task_api.core.errors import TaskNotFoundError
from task_api.core.repository_protocols import TaskLike, TaskRepository
from task_api.core.task_records import (
    build_new_task, merge_task, task_to_dict, writable_fields,
)
from task_api.schemas.task import TaskInput

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskService:
    """Fetch, create, update, and delete tasks."""

    def __init__(
        self, store: TaskRepository, clock: Callable[[], datetime] = _utcnow,
    ):
        self.store = store
        self.clock = clock

    async def get_tasks(self) -> list[TaskLike]:
        return await self.store.select_all()

    async def get_task(self, task_id: TaskId) -> TaskLike | None:
        """Return the task, or None when the store has nothing for this id."""
        task = await self.store.select_by_id(task_id)
        if not task:
            return None
        return task

    async def create_task(self, data: TaskInput) -> TaskId:
        """Persist a new task and return its id."""
        row = build_new_task(data.sent_fields(), self.clock())
        task = await self.store.create(row)
        logger.info(f"Task {task.id} created", extra={"task_id": task.id})
        return TaskId(task.id)

    async def update_task(self, task_id: TaskId, data: TaskInput) -> None:
        """Shallow-merge the sent fields onto the stored task."""
        task = await self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        merged = merge_task(task_to_dict(task), data.sent_fields())
        await self.store.update(task_id, writable_fields(merged))
        logger.info(f"Task {task_id} updated", extra={"task_id": task_id})

    async def delete_task(self, task_id: TaskId) -> None:
        await self.store.delete(task_id)
        logger.info(f"Task {task_id} deleted", extra={"task_id": task_id})
