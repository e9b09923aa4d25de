"""Request Dependencies — bearer-token authentication and service wiring.

Invariants:
    - get_current_user raises AuthenticationError (401) without a valid token
    - get_optional_user returns None without a token, but still rejects an unknown one
    - Services share the request's AsyncSession (get_db is cached per request)

Design Decisions:
    - HTTPBearer(auto_error=False): missing credentials are reported through the
      PaddockError funnel instead of FastAPI's default 403
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from paddock_api.config import get_settings
from paddock_api.core.errors import AuthenticationError
from paddock_api.infrastructure.database import get_db
from paddock_api.models.user import User
from paddock_api.services.embedded_children import EmbeddedChildService
from paddock_api.services.paddock_service import PaddockService
from paddock_api.services.step_service import StepService
from paddock_api.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User | None:
    """Caller identity if a bearer token was sent, else None."""
    if credentials is None:
        return None
    user = await UserService(db).get_by_token(credentials.credentials)
    if user is None:
        raise AuthenticationError("Bearer token not recognized")
    return user


async def get_current_user(
    user: User | None = Depends(get_optional_user),
) -> User:
    """Caller identity; the route requires a token."""
    if user is None:
        raise AuthenticationError()
    return user


def get_paddock_service(db: AsyncSession = Depends(get_db)) -> PaddockService:
    return PaddockService(
        db, allow_anonymous_create=get_settings().allow_anonymous_create,
    )


def get_step_service(db: AsyncSession = Depends(get_db)) -> StepService:
    return StepService(
        db, allow_anonymous_create=get_settings().allow_anonymous_create,
    )


def get_embedded_child_service(
    db: AsyncSession = Depends(get_db),
) -> EmbeddedChildService:
    return EmbeddedChildService(
        db, allow_anonymous_create=get_settings().allow_anonymous_create,
    )
