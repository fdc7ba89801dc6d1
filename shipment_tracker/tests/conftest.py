"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from shipment_tracker.app.main import app
from shipment_tracker.app.db.session import get_db, enable_sqlite_foreign_keys
from shipment_tracker.app.db.schema_loader import load_schema, drop_schema
from shipment_tracker.app.services.seeding import seed_database

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test, foreign keys enforced."""
    test_engine = enable_sqlite_foreign_keys(create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    ))
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def schema(engine):
    """Create the four empty tables before the test and drop them after."""
    await load_schema(engine)
    yield
    await drop_schema(engine)


@pytest.fixture
async def db_session(session_factory, schema):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session):
    """Session on a database holding the full fixture set."""
    await seed_database(db_session)
    return db_session


@pytest.fixture
async def client(session_factory, schema):
    """Async client against the app, backed by the seeded test database."""
    async with session_factory() as session:
        await seed_database(session)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides = {}
