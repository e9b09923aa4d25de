"""Step Service — CRUD over the standalone steps collection.

Invariants:
    - list_for_owner only returns steps whose owner is the caller
    - update/delete require ownership; ownerless steps are read-only
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from paddock_api.core.ownership import require_found, require_ownership, resolve_owner
from paddock_api.models.step import Step
from paddock_api.models.user import User
from paddock_api.schemas.step import StepCreate
from paddock_api.services.user_service import UserService

logger = logging.getLogger(__name__)


class StepService:
    """CRUD over the steps collection."""

    def __init__(self, db: AsyncSession, allow_anonymous_create: bool = True):
        self.db = db
        self.allow_anonymous_create = allow_anonymous_create

    async def _get_or_404(self, step_id: uuid.UUID) -> Step:
        return require_found(await self.db.get(Step, step_id), "Step", step_id)

    async def list_for_owner(self, caller: User) -> list[Step]:
        result = await self.db.execute(
            select(Step)
            .where(Step.owner_id == caller.id)
            .order_by(Step.created_at.asc()),
        )
        return list(result.scalars().all())

    async def get(self, step_id: uuid.UUID) -> Step:
        return await self._get_or_404(step_id)

    async def create(self, payload: StepCreate, caller: User | None) -> Step:
        owner_id = resolve_owner(
            payload.owner, caller.id if caller else None, "Step",
            allow_anonymous=self.allow_anonymous_create, required=False,
        )
        if owner_id is not None:
            await UserService(self.db).require_existing(owner_id)

        step = Step(title=payload.title, owner_id=owner_id)
        self.db.add(step)
        await self.db.commit()
        await self.db.refresh(step)
        logger.info(f"Step '{step.title}' created", extra={"user_id": str(owner_id)})
        return step

    async def update(self, step_id: uuid.UUID, changes: dict, caller: User) -> None:
        step = await self._get_or_404(step_id)
        require_ownership(caller.id, step.owner_id, "Step", step_id)
        if not changes:
            return
        for key, value in changes.items():
            setattr(step, key, value)
        await self.db.commit()

    async def delete(self, step_id: uuid.UUID, caller: User) -> None:
        step = await self._get_or_404(step_id)
        require_ownership(caller.id, step.owner_id, "Step", step_id)
        await self.db.delete(step)
        await self.db.commit()
