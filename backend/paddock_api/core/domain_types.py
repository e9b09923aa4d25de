"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, PaddockId, ChildId wrap UUIDs — never use bare UUID in domain logic
    - All valid child kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for ChildKind: the value doubles as the paddock attribute and the
      JSON list key ("steps", "systems")
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
PaddockId = NewType("PaddockId", UUID)
ChildId = NewType("ChildId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ChildKind(str, Enum):
    """The two record types a paddock embeds."""
    STEPS = "steps"
    SYSTEMS = "systems"

    @property
    def resource_type(self) -> str:
        """Singular display name used in error messages."""
        return "Step" if self is ChildKind.STEPS else "System"

    @property
    def envelope_key(self) -> str:
        """Key wrapping a single child in request/response bodies."""
        return "step" if self is ChildKind.STEPS else "system"
