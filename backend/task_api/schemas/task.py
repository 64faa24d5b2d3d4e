"""Task Schemas — Pydantic models for the task HTTP contract.

Invariants:
    - TaskInput accepts any JSON types; coercion happens in core/task_records.py
    - model_fields_set tells "absent" apart from "sent as null"
    - TaskResponse mirrors the persisted row (is_premium, not is_finalizada)

Design Decisions:
    - Unknown keys ignored: clients post whole objects back on update
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class TaskInput(BaseModel):
    """Inbound task fields for create and update."""
    model_config = ConfigDict(extra="ignore")

    descripcion: Any = None
    observacion: Any = None
    is_finalizada: Any = None

    def sent_fields(self) -> dict[str, Any]:
        """Only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class TaskResponse(BaseModel):
    """Task record as returned by GET endpoints."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    descripcion: str
    observacion: str | None = None
    is_premium: bool
    registration_date: datetime


class MessageResponse(BaseModel):
    msg: str


class TaskCreatedResponse(BaseModel):
    msg: str
    taskId: int
