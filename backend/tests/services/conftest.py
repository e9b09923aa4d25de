"""Route test fixtures — async DB + FastAPI test client + two signed-in users.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - owner holds token "token-owner", intruder holds token "token-intruder"

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from paddock_api.core.tokens import hash_token
from paddock_api.db.base import Base
from paddock_api.infrastructure.database import get_db, DatabaseSessionManager
from paddock_api.models.user import User
import paddock_api.models  # noqa: F401
import paddock_api.infrastructure.database as db_module
from paddock_api.main import app

OWNER_TOKEN = "token-owner"
INTRUDER_TOKEN = "token-intruder"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def owner(test_db):
    user = User(email="owner@example.com", token_digest=hash_token(OWNER_TOKEN))
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def intruder(test_db):
    user = User(email="intruder@example.com", token_digest=hash_token(INTRUDER_TOKEN))
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_paddock(client, owner):
    """Create a paddock through the API and return its JSON."""
    res = await client.post(
        "/api/v1/paddocks",
        json={"paddock": {"title": "North field", "owner": str(owner.id)}},
    )
    assert res.status_code == 201
    return res.json()["paddock"]


@pytest.fixture
def owner_auth(owner):
    """Authorization header for the owner."""
    return bearer(OWNER_TOKEN)


@pytest.fixture
def intruder_auth(intruder):
    """Authorization header for a signed-in user who owns nothing."""
    return bearer(INTRUDER_TOKEN)
