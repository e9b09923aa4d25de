"""Embedded Child Schemas — payloads for steps and systems stored inside a paddock.

Invariants:
    - ChildCreate.title: 1-255 chars, stripped, non-empty
    - ChildOut mirrors the dict shape built by core/embedded_list.make_child
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChildCreate(BaseModel):
    """Step or system appended to a paddock."""
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


class ChildOut(BaseModel):
    """Embedded child as stored in the paddock's JSON list."""
    id: str
    title: str
    owner: str | None = None
    created_at: str
    updated_at: str


class StepAppendRequest(BaseModel):
    step: ChildCreate


class SystemAppendRequest(BaseModel):
    system: ChildCreate


class EmbeddedStepEnvelope(BaseModel):
    step: ChildOut


class EmbeddedStepListEnvelope(BaseModel):
    steps: list[ChildOut]


class EmbeddedSystemListEnvelope(BaseModel):
    systems: list[ChildOut]
