"""Initial migration matches the ORM metadata (indexes and unique constraints)."""

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine

from paddock_api.db.base import Base
import paddock_api.models  # noqa: F401

MIGRATION = (
    Path(__file__).resolve().parents[2] / "alembic" / "versions" / "001_initial_schema.py"
)
TABLES = ("users", "paddocks", "steps", "systems")


def _load_migration():
    spec = importlib.util.spec_from_file_location("initial_schema", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _shape(sync_conn) -> dict:
    inspector = inspect(sync_conn)
    return {
        table: {
            "indexes": {
                (ix["name"], tuple(ix["column_names"]), bool(ix["unique"]))
                for ix in inspector.get_indexes(table)
            },
            "unique": {
                tuple(uc["column_names"])
                for uc in inspector.get_unique_constraints(table)
            },
        }
        for table in TABLES
    }


async def _reflect(build) -> dict:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(build)
            return await conn.run_sync(_shape)
    finally:
        await engine.dispose()


def _run_upgrade(sync_conn):
    migration = _load_migration()
    with Operations.context(MigrationContext.configure(sync_conn)):
        migration.upgrade()


@pytest.fixture
async def migrated_shape():
    return await _reflect(_run_upgrade)


@pytest.fixture
async def model_shape():
    return await _reflect(Base.metadata.create_all)


async def test_migration_matches_models(migrated_shape, model_shape):
    assert migrated_shape == model_shape


async def test_token_digest_has_single_unique_index(migrated_shape):
    users = migrated_shape["users"]
    assert ("ix_users_token_digest", ("token_digest",), True) in users["indexes"]
    assert ("token_digest",) not in users["unique"]
