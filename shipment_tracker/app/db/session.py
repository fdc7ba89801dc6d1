"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support (aiosqlite by default, asyncpg for
PostgreSQL).
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from shipment_tracker.app.core.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> AsyncEngine:
    """
    Turn on foreign key enforcement for every SQLite connection of the engine.
    
    SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def build_engine(database_url: str = None, **kwargs) -> AsyncEngine:
    """Create an async engine for the configured database."""
    database_url = database_url or settings.database_url
    engine_kwargs = {"echo": settings.db_echo, "future": True}
    if not database_url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["max_overflow"] = settings.db_max_overflow
    engine_kwargs.update(kwargs)
    return enable_sqlite_foreign_keys(create_async_engine(database_url, **engine_kwargs))


# Create async engine
engine = build_engine()

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def get_db():
    """
    FastAPI dependency for database sessions.
    
    Yields an async database session and ensures it's properly closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
