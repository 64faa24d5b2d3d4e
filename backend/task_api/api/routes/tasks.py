"""Task Routes — HTTP boundary for the task resource.

Invariants:
    - Route ids parsed to TaskId here; malformed ids → 400 "Invalid task id"
    - Empty, malformed, or non-object bodies → 400 "Invalid task data"
    - Create requires a truthy descripcion (422); update does not re-check it
    - Get and delete check existence here and answer 404

Design Decisions:
    - Bodies read from Request instead of a typed body param: absent bodies must
      produce the legacy 400 message, not a framework validation error
    - Errors raised as TaskApiError subclasses; error_handlers.py maps status codes
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import TaskId, parse_task_id
from task_api.core.errors import (
    InvalidTaskDataError, InvalidTaskIdError, MissingDescripcionError,
    TaskNotFoundError,
)
from task_api.infrastructure.database import get_db
from task_api.schemas.task import (
    MessageResponse, TaskCreatedResponse, TaskInput, TaskResponse,
)
from task_api.services.task_service import TaskService
from task_api.services.task_store import TaskStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(TaskStore(db))


async def read_task_input(request: Request) -> TaskInput:
    """Parse the JSON object body or raise InvalidTaskDataError."""
    raw = await request.body()
    if not raw.strip():
        raise InvalidTaskDataError()
    try:
        payload = json.loads(raw)
    except ValueError:
        raise InvalidTaskDataError()
    if not isinstance(payload, dict):
        raise InvalidTaskDataError()
    return TaskInput.model_validate(payload)


def require_task_id(raw_id: str) -> TaskId:
    task_id = parse_task_id(raw_id)
    if task_id is None:
        raise InvalidTaskIdError(raw_id)
    return task_id


@router.get("", response_model=list[TaskResponse])
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """All tasks in storage order."""
    return await service.get_tasks()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task_details(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    tid = require_task_id(task_id)
    task = await service.get_task(tid)
    if task is None:
        raise TaskNotFoundError(tid)
    return task


@router.post("", response_model=TaskCreatedResponse)
async def create_task(
    request: Request, service: TaskService = Depends(get_task_service),
):
    """Create a task. descripcion is the only required field."""
    data = await read_task_input(request)
    if not data.descripcion:
        raise MissingDescripcionError()

    new_id = await service.create_task(data)
    return TaskCreatedResponse(msg="Task created", taskId=new_id)


@router.api_route(
    "/{task_id}", methods=["PUT", "PATCH"], response_model=MessageResponse,
)
async def update_task(
    task_id: str,
    request: Request,
    service: TaskService = Depends(get_task_service),
):
    """Merge the sent fields onto an existing task."""
    tid = require_task_id(task_id)
    data = await read_task_input(request)
    await service.update_task(tid, data)
    return MessageResponse(msg="Task updated")


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    tid = require_task_id(task_id)
    if await service.get_task(tid) is None:
        raise TaskNotFoundError(tid)

    await service.delete_task(tid)
    return MessageResponse(msg="Task deleted")
