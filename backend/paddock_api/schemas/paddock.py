"""Paddock Schemas — Pydantic envelopes with field-level validation for API boundaries.

Invariants:
    - PaddockCreate.title: 1-255 chars, stripped, non-empty
    - PaddockUpdate drops blank fields before validation, strips title, never applies owner
    - Unknown fields are rejected (extra="forbid")

Design Decisions:
    - owner accepted on PaddockUpdate but excluded from dumps: clients that echo
      the whole record back still validate, the owner simply has no effect
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from paddock_api.core.remove_blanks import remove_blank_fields
from paddock_api.schemas.child import ChildCreate, ChildOut


class PaddockCreate(BaseModel):
    """Paddock creation — owner may come from the body or the caller's token."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=255)
    owner: UUID | None = None
    steps: list[ChildCreate] = Field(default_factory=list)
    systems: list[ChildCreate] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class PaddockUpdate(BaseModel):
    """Partial paddock update. Blank fields are ignored, owner is discarded."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    owner: Any = Field(None, exclude=True)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    @model_validator(mode="before")
    @classmethod
    def drop_blank_fields(cls, data: Any) -> Any:
        return remove_blank_fields(data)

    def changes(self) -> dict:
        """Fields the client actually set, minus owner."""
        dumped = self.model_dump(exclude_unset=True, exclude={"owner"})
        return {k: v for k, v in dumped.items() if v is not None}


class PaddockOut(BaseModel):
    """Paddock as returned to clients."""
    id: UUID
    title: str
    owner: UUID
    steps: list[ChildOut]
    systems: list[ChildOut]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, paddock) -> "PaddockOut":
        return cls(
            id=paddock.id,
            title=paddock.title,
            owner=paddock.owner_id,
            steps=paddock.steps or [],
            systems=paddock.systems or [],
            created_at=paddock.created_at,
            updated_at=paddock.updated_at,
        )


class PaddockCreateRequest(BaseModel):
    paddock: PaddockCreate


class PaddockUpdateRequest(BaseModel):
    paddock: PaddockUpdate


class PaddockEnvelope(BaseModel):
    paddock: PaddockOut


class PaddockListEnvelope(BaseModel):
    paddocks: list[PaddockOut]
