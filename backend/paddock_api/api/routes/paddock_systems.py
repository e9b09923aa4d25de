"""Paddock System Routes — the systems embedded inside one paddock.

Invariants:
    - Appending stores a standalone System row and its embedded copy atomically
    - DELETE /last is declared before DELETE /{system_id}
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
    EmbeddedSystemListEnvelope,
    SystemAppendRequest,
)
from paddock_api.schemas.paddock import PaddockEnvelope, PaddockOut
from paddock_api.services.embedded_children import EmbeddedChildService

router = APIRouter(prefix="/api/v1/paddocks/{paddock_id}/systems", tags=["paddock-systems"])


@router.get("", response_model=EmbeddedSystemListEnvelope)
async def list_paddock_systems(
    paddock_id: UUID,
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    systems = await service.list_children(paddock_id, ChildKind.SYSTEMS)
    return EmbeddedSystemListEnvelope(systems=[ChildOut(**s) for s in systems])


@router.post(
    "", response_model=PaddockEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def append_paddock_system(
    paddock_id: UUID,
    body: SystemAppendRequest,
    caller: User | None = Depends(get_optional_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    paddock = await service.append_system(paddock_id, body.system, caller)
    return PaddockEnvelope(paddock=PaddockOut.from_model(paddock))


@router.delete("/last", status_code=status.HTTP_204_NO_CONTENT)
async def pop_paddock_system(
    paddock_id: UUID,
    caller: User = Depends(get_current_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    await service.pop_last(paddock_id, ChildKind.SYSTEMS, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{system_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_paddock_system(
    paddock_id: UUID,
    system_id: UUID,
    caller: User = Depends(get_current_user),
    service: EmbeddedChildService = Depends(get_embedded_child_service),
):
    await service.remove_child(paddock_id, ChildKind.SYSTEMS, str(system_id), caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
