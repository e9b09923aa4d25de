"""User Lookups — token verification and owner existence checks.

Invariants:
    - get_by_token compares digests, never raw tokens
    - require_existing raises UnknownOwnerError for ids with no user row
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from paddock_api.core.errors import UnknownOwnerError
from paddock_api.core.tokens import hash_token
from paddock_api.models.user import User


class UserService:
    """Read-only access to identity records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_token(self, token: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.token_digest == hash_token(token)),
        )
        return result.scalar_one_or_none()

    async def require_existing(self, user_id: uuid.UUID) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise UnknownOwnerError(str(user_id))
        return user
