"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the integer primary key — never pass raw path strings to the store
    - Field names below are the single source for public vs persisted naming

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Public input flag is_finalizada is persisted as is_premium (ADR: legacy clients
      send is_finalizada; column name kept for backward compatibility)
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)


# ─── Field Names ─────────────────────────────────────────────────

PUBLIC_FLAG_FIELD = "is_finalizada"
PERSISTED_FLAG_FIELD = "is_premium"

# Never written after insert
IMMUTABLE_FIELDS = frozenset({"id", "registration_date"})


# Matches the INTEGER primary key
MAX_TASK_ID = 2**31 - 1


def parse_task_id(raw: object) -> TaskId | None:
    """Parse a route id into a TaskId.

    Returns None for anything that is not an ASCII integer in 1..MAX_TASK_ID.
    """
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if value < 1 or value > MAX_TASK_ID:
        return None
    return TaskId(value)
