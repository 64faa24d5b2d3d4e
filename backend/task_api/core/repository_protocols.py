"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store performs no validation: direct pass-through to persistence

Design Decisions:
    - Protocol over ABC: structural subtyping, TaskService accepts any store
      (the SQLAlchemy TaskStore in production, fakes in tests)
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Any, Protocol

from task_api.core.domain_types import TaskId


class TaskLike(Protocol):
    """Structural contract for Task objects returned by a store."""
    id: int
    descripcion: str
    observacion: str | None
    is_premium: bool
    registration_date: Any


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by shell."""
    async def select_all(self) -> list[TaskLike]: ...
    async def select_by_id(self, task_id: TaskId) -> TaskLike | None: ...
    async def create(self, fields: dict) -> TaskLike: ...
    async def update(self, task_id: TaskId, fields: dict) -> None: ...
    async def delete(self, task_id: TaskId) -> None: ...
