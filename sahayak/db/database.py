"""
Database Connection and Session Management.
Uses SQLAlchemy with async SQLite by default.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from sahayak.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# Create declarative base
Base = declarative_base()

# Database engine (will be initialized on startup)
_engine = None
_async_session_factory = None


def _engine_options(database_url: str) -> dict:
    """SQLite needs a shared connection to work with async sessions."""
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return {}

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool
    }


async def init_db(database_url: Optional[str] = None):
    """Initialize the database connection and create tables."""
    global _engine, _async_session_factory

    database_url = database_url or settings.DATABASE_URL

    _engine = create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        **_engine_options(database_url)
    )

    # Create session factory
    _async_session_factory = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )

    # Import models to register them with Base
    from sahayak.db import models  # noqa

    # Create all tables
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database initialized: {make_url(database_url).render_as_string(hide_password=True)}")


async def close_db():
    """Close database connections."""
    global _engine, _async_session_factory

    if _engine:
        await _engine.dispose()
        _engine = None
        _async_session_factory = None
        logger.info("Database connections closed")


def is_initialized() -> bool:
    return _async_session_factory is not None


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session."""
    if not _async_session_factory:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _async_session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
