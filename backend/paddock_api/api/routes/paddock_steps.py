"""Paddock Step Routes — the steps embedded inside one paddock.

Invariants:
    - Listing and showing embedded steps needs no token
    - Appending accepts an optional token and answers 201 with the whole paddock
    - DELETE /last is declared before DELETE /{step_id} so "last" is never parsed as an id
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from paddock_api.api.dependencies import (
    get_current_user, get_embedded_child_service, get_optional_user,
)
from paddock_api.core.domain_types import ChildKind
from paddock_api.models.user import User
from paddock_api.schemas.child import (
    ChildOut,
    EmbeddedStepEnvelope,
    EmbeddedStepListEnvelope,
    StepAppendRequest,
)
from paddock_api.schemas.paddock import PaddockEnvelope, PaddockOut
from paddock_api.services.embedded_children import EmbeddedChildService

router = APIRouter(prefix="/api/v1/paddocks/{paddock_id}/steps", tags=["paddock-steps"])


@router.get("", response_model=EmbeddedStepListEnvelope)
async def list_paddock_steps(
    paddock_id: UUID,
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    steps = await service.list_children(paddock_id, ChildKind.STEPS)
    return EmbeddedStepListEnvelope(steps=[ChildOut(**s) for s in steps])


@router.get("/{step_id}", response_model=EmbeddedStepEnvelope)
async def get_paddock_step(
    paddock_id: UUID,
    step_id: UUID,
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    """Return the one embedded step named by step_id as {step: {...}}.

    The whole list lives at GET /paddocks/{paddock_id}/steps; this route
    never answers with {steps: [...]}.
    """
    step = await service.get_child(paddock_id, ChildKind.STEPS, str(step_id))
    return EmbeddedStepEnvelope(step=ChildOut(**step))


@router.post(
    "", response_model=PaddockEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def append_paddock_step(
    paddock_id: UUID,
    body: StepAppendRequest,
    caller: User | None = Depends(get_optional_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    """Append a step to the end of the paddock's steps."""
    paddock = await service.append_step(paddock_id, body.step, caller)
    return PaddockEnvelope(paddock=PaddockOut.from_model(paddock))


@router.delete("/last", status_code=status.HTTP_204_NO_CONTENT)
async def pop_paddock_step(
    paddock_id: UUID,
    caller: User = Depends(get_current_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    """Remove the most recently appended step."""
    await service.pop_last(paddock_id, ChildKind.STEPS, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{step_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_paddock_step(
    paddock_id: UUID,
    step_id: UUID,
    caller: User = Depends(get_current_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    await service.remove_child(paddock_id, ChildKind.STEPS, str(step_id), caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
