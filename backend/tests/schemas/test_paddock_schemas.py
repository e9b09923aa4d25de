"""Request schemas — envelopes, title validation, blank stripping, owner discard.

Invariants:
    - Create payloads need a non-blank title
    - Update payloads ignore blank fields and never report owner as a change
    - Unknown fields are rejected
"""

import uuid

import pytest
from pydantic import ValidationError

from paddock_api.schemas.child import ChildCreate, StepAppendRequest
from paddock_api.schemas.paddock import PaddockCreate, PaddockCreateRequest, PaddockUpdate
from paddock_api.schemas.step import StepCreate, StepUpdate


def test_paddock_create_strips_title():
    owner = uuid.uuid4()
    paddock = PaddockCreate(title="  North  ", owner=owner)
    assert paddock.title == "North"
    assert paddock.owner == owner
    assert paddock.steps == [] and paddock.systems == []


def test_paddock_create_rejects_whitespace_title():
    with pytest.raises(ValidationError):
        PaddockCreate(title="   ")


def test_paddock_create_rejects_unknown_field():
    with pytest.raises(ValidationError):
        PaddockCreate(title="A", colour="green")


def test_paddock_create_request_requires_envelope():
    with pytest.raises(ValidationError):
        PaddockCreateRequest.model_validate({"title": "A"})


def test_paddock_create_accepts_prepopulated_children():
    paddock = PaddockCreate(title="A", steps=[{"title": "s1"}], systems=[{"title": "y1"}])
    assert [s.title for s in paddock.steps] == ["s1"]
    assert [s.title for s in paddock.systems] == ["y1"]


def test_paddock_update_discards_owner():
    update = PaddockUpdate.model_validate({"title": "B", "owner": str(uuid.uuid4())})
    assert update.changes() == {"title": "B"}


def test_paddock_update_ignores_blank_title():
    assert PaddockUpdate.model_validate({"title": ""}).changes() == {}


def test_paddock_update_ignores_explicit_null_title():
    assert PaddockUpdate.model_validate({"title": None}).changes() == {}


def test_paddock_update_rejects_unknown_field():
    with pytest.raises(ValidationError):
        PaddockUpdate.model_validate({"steps": []})


def test_step_update_discards_owner():
    update = StepUpdate.model_validate({"title": "x", "owner": "someone"})
    assert update.changes() == {"title": "x"}


def test_step_create_owner_is_optional():
    assert StepCreate(title="s").owner is None


def test_child_create_rejects_invalid_owner():
    with pytest.raises(ValidationError):
        ChildCreate(title="s", owner="not-a-uuid")


def test_step_append_request_uses_step_key():
    body = StepAppendRequest.model_validate({"step": {"title": "Mow"}})
    assert body.step.title == "Mow"


def test_paddock_update_strips_title():
    assert PaddockUpdate.model_validate({"title": "  B  "}).changes() == {"title": "B"}


def test_step_update_strips_title():
    assert StepUpdate.model_validate({"title": "  s  "}).changes() == {"title": "s"}
