"""Step Routes — index, show, create, update and destroy for /steps.

Invariants:
    - index only lists the caller's own steps
    - Mirrors the paddock routes otherwise
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from paddock_api.api.dependencies import (
    get_current_user, get_optional_user, get_step_service,
)
from paddock_api.models.user import User
from paddock_api.schemas.step import (
    StepCreateRequest,
    StepEnvelope,
    StepListEnvelope,
    StepOut,
    StepUpdateRequest,
)
from paddock_api.services.step_service import StepService

router = APIRouter(prefix="/api/v1/steps", tags=["steps"])


@router.get("", response_model=StepListEnvelope)
async def list_steps(
    caller: User = Depends(get_current_user),
    service: StepService = Depends(get_step_service),
):
    """List the caller's steps."""
    steps = await service.list_for_owner(caller)
    return StepListEnvelope(steps=[StepOut.from_model(s) for s in steps])


@router.get("/{step_id}", response_model=StepEnvelope)
async def get_step(
    step_id: UUID,
    caller: User = Depends(get_current_user),
    service: StepService = Depends(get_step_service),
):
    step = await service.get(step_id)
    return StepEnvelope(step=StepOut.from_model(step))


@router.post(
    "", response_model=StepEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_step(
    body: StepCreateRequest,
    caller: User | None = Depends(get_optional_user),
    service: StepService = Depends(get_step_service),
):
    step = await service.create(body.step, caller)
    return StepEnvelope(step=StepOut.from_model(step))


@router.patch("/{step_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_step(
    step_id: UUID,
    body: StepUpdateRequest,
    caller: User = Depends(get_current_user),
    service: StepService = Depends(get_step_service),
):
    await service.update(step_id, body.step.changes(), caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{step_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_step(
    step_id: UUID,
    caller: User = Depends(get_current_user),
    service: StepService = Depends(get_step_service),
):
    await service.delete(step_id, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
