"""Embedded Children — append, list, remove and pop the steps/systems inside a paddock.

Invariants:
    - Every mutation is one read-modify-write of the parent row (version-checked)
    - Removal and pop require the caller to own the parent paddock
    - append_system stores the standalone System row and the embedded copy in the
      same transaction, with the same id and timestamps

Design Decisions:
    - One service for both kinds, parameterized by ChildKind: the two lists only
      differ in the attribute they live in
    - Pop is scoped by paddock id, not by owner: the paddock is identified the
      same way as on every other route
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from paddock_api.core.domain_types import ChildKind
from paddock_api.core.embedded_list import (
    append_child, find_child, make_child, pop_last_child, remove_child,
)
from paddock_api.core.ownership import require_ownership, resolve_owner
from paddock_api.models.paddock import Paddock
from paddock_api.models.system import System
from paddock_api.models.user import User
from paddock_api.schemas.child import ChildCreate
from paddock_api.services.paddock_service import get_paddock_or_404
from paddock_api.services.user_service import UserService

logger = logging.getLogger(__name__)


class EmbeddedChildService:
    """Operations on a paddock's embedded child lists."""

    def __init__(self, db: AsyncSession, allow_anonymous_create: bool = True):
        self.db = db
        self.allow_anonymous_create = allow_anonymous_create

    async def list_children(
        self, paddock_id: uuid.UUID, kind: ChildKind,
    ) -> list[dict]:
        paddock = await get_paddock_or_404(self.db, paddock_id)
        return list(getattr(paddock, kind.value) or [])

    async def get_child(
        self, paddock_id: uuid.UUID, kind: ChildKind, child_id: str,
    ) -> dict:
        paddock = await get_paddock_or_404(self.db, paddock_id)
        return find_child(getattr(paddock, kind.value), child_id, kind)

    async def _resolve_child_owner(
        self, payload: ChildCreate, caller: User | None, kind: ChildKind,
    ):
        owner_id = resolve_owner(
            payload.owner, caller.id if caller else None, kind.resource_type,
            allow_anonymous=self.allow_anonymous_create, required=False,
        )
        if owner_id is not None:
            await UserService(self.db).require_existing(owner_id)
        return owner_id

    async def append_step(
        self, paddock_id: uuid.UUID, payload: ChildCreate, caller: User | None,
    ) -> Paddock:
        """Append a new step to the paddock and return the updated paddock."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        owner_id = await self._resolve_child_owner(payload, caller, ChildKind.STEPS)
        child = make_child(payload.title, owner_id)
        paddock.steps = append_child(paddock.steps, child)
        return await self._save(paddock, "Step appended", child["id"])

    async def append_system(
        self, paddock_id: uuid.UUID, payload: ChildCreate, caller: User | None,
    ) -> Paddock:
        """Create a System row and append the same record to the paddock."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        owner_id = await self._resolve_child_owner(payload, caller, ChildKind.SYSTEMS)
        now = datetime.now(timezone.utc)
        system = System(
            id=uuid.uuid4(), title=payload.title, owner_id=owner_id,
            created_at=now, updated_at=now,
        )
        self.db.add(system)
        child = make_child(system.title, owner_id, child_id=str(system.id), now=now)
        paddock.systems = append_child(paddock.systems, child)
        return await self._save(paddock, "System appended", child["id"])

    async def remove_child(
        self,
        paddock_id: uuid.UUID,
        kind: ChildKind,
        child_id: str,
        caller: User,
    ) -> None:
        """Remove one embedded child by id. Caller must own the paddock."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        require_ownership(caller.id, paddock.owner_id, "Paddock", paddock_id)
        setattr(
            paddock, kind.value,
            remove_child(getattr(paddock, kind.value), child_id, kind),
        )
        await self._save(paddock, f"{kind.resource_type} removed", child_id)

    async def pop_last(
        self, paddock_id: uuid.UUID, kind: ChildKind, caller: User,
    ) -> None:
        """Remove the last embedded child, if any. Caller must own the paddock."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        require_ownership(caller.id, paddock.owner_id, "Paddock", paddock_id)
        children = getattr(paddock, kind.value) or []
        if not children:
            return
        setattr(paddock, kind.value, pop_last_child(children))
        await self._save(paddock, f"Last {kind.resource_type} popped", children[-1]["id"])

    async def _save(self, paddock: Paddock, message: str, child_id: str) -> Paddock:
        await self.db.commit()
        await self.db.refresh(paddock)
        logger.info(
            message,
            extra={"paddock_id": str(paddock.id), "child_id": child_id},
        )
        return paddock
