"""Paddock Service — list, show, create, update and delete paddocks.

Invariants:
    - list_all is unscoped: every paddock, oldest first
    - update/delete run require_ownership before touching the row
    - update never changes owner_id (PaddockUpdate.changes() excludes it)
    - Embedded lists supplied at creation get fresh ids and timestamps
    - Children supplied at creation pass the same owner checks as appended ones

Design Decisions:
    - get_paddock_or_404 exported for reuse by the embedded-children service
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from paddock_api.core.embedded_list import make_child
from paddock_api.core.ownership import require_found, require_ownership, resolve_owner
from paddock_api.models.paddock import Paddock
from paddock_api.models.user import User
from paddock_api.schemas.child import ChildCreate
from paddock_api.schemas.paddock import PaddockCreate
from paddock_api.services.user_service import UserService

logger = logging.getLogger(__name__)


async def get_paddock_or_404(db: AsyncSession, paddock_id: uuid.UUID) -> Paddock:
    """Get paddock or raise ResourceNotFoundError."""
    paddock = await db.get(Paddock, paddock_id)
    return require_found(paddock, "Paddock", paddock_id)


class PaddockService:
    """CRUD over the paddocks collection."""

    def __init__(self, db: AsyncSession, allow_anonymous_create: bool = True):
        self.db = db
        self.allow_anonymous_create = allow_anonymous_create

    async def list_all(self) -> list[Paddock]:
        result = await self.db.execute(
            select(Paddock).order_by(Paddock.created_at.asc()),
        )
        return list(result.scalars().all())

    async def get(self, paddock_id: uuid.UUID) -> Paddock:
        return await get_paddock_or_404(self.db, paddock_id)

    async def create(self, payload: PaddockCreate, caller: User | None) -> Paddock:
        """Create a paddock; owner resolved from body and caller."""
        caller_id = caller.id if caller else None
        owner_id = resolve_owner(
            payload.owner, caller_id, "Paddock",
            allow_anonymous=self.allow_anonymous_create, required=True,
        )
        await UserService(self.db).require_existing(owner_id)

        paddock = Paddock(
            title=payload.title,
            owner_id=owner_id,
            steps=await self._build_children(payload.steps, caller_id, "Step"),
            systems=await self._build_children(payload.systems, caller_id, "System"),
        )
        self.db.add(paddock)
        await self.db.commit()
        await self.db.refresh(paddock)
        logger.info(
            f"Paddock '{paddock.title}' created",
            extra={"paddock_id": str(paddock.id), "user_id": str(owner_id)},
        )
        return paddock

    async def _build_children(
        self, children: list[ChildCreate], caller_id, resource_type: str,
    ) -> list[dict]:
        """Embedded records for children supplied at creation, owners checked like appends."""
        users = UserService(self.db)
        built = []
        for child in children:
            child_owner = resolve_owner(
                child.owner, caller_id, resource_type,
                allow_anonymous=self.allow_anonymous_create, required=False,
            )
            if child_owner is not None:
                await users.require_existing(child_owner)
            built.append(make_child(child.title, child_owner))
        return built

    async def update(
        self, paddock_id: uuid.UUID, changes: dict, caller: User,
    ) -> None:
        """Apply a partial update. Caller must own the paddock."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        require_ownership(caller.id, paddock.owner_id, "Paddock", paddock_id)
        if not changes:
            return
        for key, value in changes.items():
            setattr(paddock, key, value)
        await self.db.commit()

    async def delete(self, paddock_id: uuid.UUID, caller: User) -> None:
        """Delete a paddock with its embedded children. Caller must own it."""
        paddock = await get_paddock_or_404(self.db, paddock_id)
        require_ownership(caller.id, paddock.owner_id, "Paddock", paddock_id)
        await self.db.delete(paddock)
        await self.db.commit()
        logger.info(
            "Paddock deleted",
            extra={"paddock_id": str(paddock_id), "user_id": str(caller.id)},
        )
