"""Step Schemas — envelopes for the standalone /steps collection.

Invariants:
    - StepCreate.title: 1-255 chars, stripped, non-empty; owner optional
    - StepUpdate drops blank fields, strips title, never applies owner
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from paddock_api.core.remove_blanks import remove_blank_fields


class StepCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=255)
    owner: UUID | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class StepUpdate(BaseModel):
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
        dumped = self.model_dump(exclude_unset=True, exclude={"owner"})
        return {k: v for k, v in dumped.items() if v is not None}


class StepOut(BaseModel):
    id: UUID
    title: str
    owner: UUID | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, step) -> "StepOut":
        return cls(
            id=step.id,
            title=step.title,
            owner=step.owner_id,
            created_at=step.created_at,
            updated_at=step.updated_at,
        )


class StepCreateRequest(BaseModel):
    step: StepCreate


class StepUpdateRequest(BaseModel):
    step: StepUpdate


class StepEnvelope(BaseModel):
    step: StepOut


class StepListEnvelope(BaseModel):
    steps: list[StepOut]
