"""Task Store — SQL pass-through against an in-memory SQLite database.

Invariants:
    - create assigns fresh ids
    - select_all returns rows in id order
    - update and delete on a missing id are no-ops
"""

import asyncio
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from task_api.db.base import Base
from task_api.core.domain_types import TaskId
from task_api.services.task_store import TaskStore

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


def _fields(descripcion: str, **extra) -> dict:
    row = {
        "descripcion": descripcion,
        "observacion": None,
        "is_premium": False,
        "registration_date": NOW,
    }
    row.update(extra)
    return row


async def test_create_assigns_id(test_db):
    store = TaskStore(test_db)
    task = await store.create(_fields("buy milk"))
    assert task.id is not None
    assert task.descripcion == "buy milk"


async def test_select_all_in_id_order(test_db):
    store = TaskStore(test_db)
    first = await store.create(_fields("a"))
    second = await store.create(_fields("b"))
    tasks = await store.select_all()
    assert [t.id for t in tasks] == [first.id, second.id]


async def test_select_by_id_missing_returns_none(test_db):
    assert await TaskStore(test_db).select_by_id(TaskId(999)) is None


async def test_update_writes_fields(test_db, test_session_factory):
    store = TaskStore(test_db)
    task = await store.create(_fields("a"))
    await store.update(TaskId(task.id), {"observacion": "urgent"})

    async with test_session_factory() as fresh:
        reloaded = await TaskStore(fresh).select_by_id(TaskId(task.id))
    assert reloaded.observacion == "urgent"
    assert reloaded.descripcion == "a"


async def test_update_missing_id_is_noop(test_db):
    store = TaskStore(test_db)
    await store.update(TaskId(404), {"observacion": "x"})
    assert await store.select_all() == []


async def test_delete_removes_row(test_db):
    store = TaskStore(test_db)
    task = await store.create(_fields("a"))
    await store.delete(TaskId(task.id))
    assert await store.select_by_id(TaskId(task.id)) is None


async def test_delete_missing_id_is_noop(test_db):
    store = TaskStore(test_db)
    await store.create(_fields("keep"))
    await store.delete(TaskId(12345))
    assert len(await store.select_all()) == 1


async def test_concurrent_creates_get_distinct_ids(tmp_path):
    """Each create on its own session; ids never collide."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def create_one(n: int) -> int:
        async with factory() as session:
            task = await TaskStore(session).create(_fields(f"task {n}"))
            return task.id

    ids = await asyncio.gather(*(create_one(n) for n in range(5)))
    await engine.dispose()

    assert len(set(ids)) == 5
