"""Task Records — pure construction and merge rules for task rows.

Invariants:
    - build_new_task never touches IO; the caller supplies "now"
    - is_premium is False unless is_finalizada was sent
    - merge_task never overwrites id or registration_date
    - merge_task applies only the fields the caller actually sent (shallow merge)

Design Decisions:
    - Plain dicts in and out: the store decides how rows are written
    - String coercion mirrors what clients already rely on (numbers become "5")
"""

from datetime import datetime
from typing import Any

from task_api.core.domain_types import (
    IMMUTABLE_FIELDS, PERSISTED_FLAG_FIELD, PUBLIC_FLAG_FIELD,
)


def coerce_text(value: Any) -> str | None:
    """Coerce to str, leaving None as None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_new_task(fields: dict[str, Any], now: datetime) -> dict[str, Any]:
    """Build the row for a new task from public input fields."""
    return {
        "descripcion": coerce_text(fields.get("descripcion")),
        "observacion": coerce_text(fields.get("observacion")),
        PERSISTED_FLAG_FIELD: (
            bool(fields[PUBLIC_FLAG_FIELD])
            if PUBLIC_FLAG_FIELD in fields else False
        ),
        "registration_date": now,
    }


def to_persisted_changes(fields: dict[str, Any]) -> dict[str, Any]:
    """Translate public update fields to column names."""
    changes: dict[str, Any] = {}
    for key, value in fields.items():
        if key == PUBLIC_FLAG_FIELD:
            changes[PERSISTED_FLAG_FIELD] = bool(value)
        elif key in ("descripcion", "observacion"):
            changes[key] = coerce_text(value)
    # descripcion is NOT NULL
    if "descripcion" in changes and changes["descripcion"] is None:
        del changes["descripcion"]
    return changes


def task_to_dict(task: Any) -> dict[str, Any]:
    """Snapshot a task object into a plain dict."""
    return {
        "id": task.id,
        "descripcion": task.descripcion,
        "observacion": task.observacion,
        PERSISTED_FLAG_FIELD: task.is_premium,
        "registration_date": task.registration_date,
    }


def merge_task(current: dict[str, Any], fields: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge public update fields onto the current row."""
    merged = dict(current)
    for key, value in to_persisted_changes(fields).items():
        if key in IMMUTABLE_FIELDS:
            continue
        merged[key] = value
    return merged


def writable_fields(row: dict[str, Any]) -> dict[str, Any]:
    """Strip immutable columns before an UPDATE."""
    return {k: v for k, v in row.items() if k not in IMMUTABLE_FIELDS}
