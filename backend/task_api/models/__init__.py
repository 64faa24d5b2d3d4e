"""ORM Models — SQLAlchemy declarative models for the task table.

Invariants:
    - All models inherit from Base (db/base.py)
    - Task is the only entity; no relationships

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from task_api.models.task import Task  # noqa: F401
