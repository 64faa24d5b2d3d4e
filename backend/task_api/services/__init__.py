"""Services Layer — task store (data access) and task service (business rules).

Invariants:
    - TaskStore is the only module that issues SQL for tasks
    - TaskService depends on the TaskRepository protocol, not on SQLAlchemy

Design Decisions:
    - Classes constructed per request with the request's AsyncSession (ADR: no shared session)
"""
