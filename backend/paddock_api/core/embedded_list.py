"""Embedded List — pure operations on a paddock's inline child records.

Invariants:
    - Every operation returns a NEW list; the input list is never mutated
    - Order of untouched elements is preserved
    - Child ids are unique strings within one list
    - pop on an empty list is a no-op

Design Decisions:
    - New list instead of in-place mutation: SQLAlchemy JSON columns only detect
      reassignment, so services write back whatever these functions return
    - Children are plain dicts: the list is persisted as-is in a JSON column
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from paddock_api.core.domain_types import ChildKind
from paddock_api.core.errors import ResourceNotFoundError


def make_child(
    title: str,
    owner: Any = None,
    child_id: str | None = None,
    now: datetime | None = None,
) -> dict:
    """Build an embedded child record with a fresh id and timestamps."""
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return {
        "id": child_id or str(uuid.uuid4()),
        "title": title,
        "owner": str(owner) if owner is not None else None,
        "created_at": stamp,
        "updated_at": stamp,
    }


def append_child(children: list[dict] | None, child: dict) -> list[dict]:
    """Return children with child appended at the end."""
    return [*(children or []), child]


def find_child(
    children: list[dict] | None, child_id: str, kind: ChildKind,
) -> dict:
    """Return the child with child_id or raise NotFound."""
    for child in children or []:
        if child.get("id") == str(child_id):
            return child
    raise ResourceNotFoundError(kind.resource_type, str(child_id))


def remove_child(
    children: list[dict] | None, child_id: str, kind: ChildKind,
) -> list[dict]:
    """Return children without child_id. Raises NotFound if it is absent."""
    find_child(children, child_id, kind)
    return [c for c in children or [] if c.get("id") != str(child_id)]


def pop_last_child(children: list[dict] | None) -> list[dict]:
    """Return children without the last element."""
    return list(children or [])[:-1]
