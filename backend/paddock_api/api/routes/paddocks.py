"""Paddock Routes — index, show, create, update and destroy for /paddocks.

Invariants:
    - index/show/update/destroy require a bearer token
    - create accepts an optional token; owner rules live in core/ownership.resolve_owner
    - update/destroy answer 204 with no body
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from paddock_api.api.dependencies import (
    get_current_user, get_optional_user, get_paddock_service,
)
from paddock_api.models.user import User
from paddock_api.schemas.paddock import (
    PaddockCreateRequest,
    PaddockEnvelope,
    PaddockListEnvelope,
    PaddockOut,
    PaddockUpdateRequest,
)
from paddock_api.services.paddock_service import PaddockService

router = APIRouter(prefix="/api/v1/paddocks", tags=["paddocks"])


@router.get("", response_model=PaddockListEnvelope)
async def list_paddocks(
    caller: User = Depends(get_current_user),
    service: PaddockService = Depends(get_paddock_service),
):
    """List every paddock."""
    paddocks = await service.list_all()
    return PaddockListEnvelope(
        paddocks=[PaddockOut.from_model(p) for p in paddocks],
    )


@router.get("/{paddock_id}", response_model=PaddockEnvelope)
async def get_paddock(
    paddock_id: UUID,
    caller: User = Depends(get_current_user),
    service: PaddockService = Depends(get_paddock_service),
):
    paddock = await service.get(paddock_id)
    return PaddockEnvelope(paddock=PaddockOut.from_model(paddock))


@router.post(
    "", response_model=PaddockEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_paddock(
    body: PaddockCreateRequest,
    caller: User | None = Depends(get_optional_user),
    service: PaddockService = Depends(get_paddock_service),
):
    """Create a paddock owned by the body owner or the caller."""
    paddock = await service.create(body.paddock, caller)
    return PaddockEnvelope(paddock=PaddockOut.from_model(paddock))


@router.patch("/{paddock_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_paddock(
    paddock_id: UUID,
    body: PaddockUpdateRequest,
    caller: User = Depends(get_current_user),
    service: PaddockService = Depends(get_paddock_service),
):
    """Partial update. Any owner in the body is ignored."""
    await service.update(paddock_id, body.paddock.changes(), caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{paddock_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paddock(
    paddock_id: UUID,
    caller: User = Depends(get_current_user),
    service: PaddockService = Depends(get_paddock_service),
):
    await service.delete(paddock_id, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
