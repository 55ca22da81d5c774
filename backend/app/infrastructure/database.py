"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - connect_with_retry never raises on an unreachable store; it keeps retrying
      with a fixed delay until connected (or max_attempts, when given)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from app.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def map_db_error(exc: SQLAlchemyError, operation: str = "execute") -> DatabaseError:
    """Translate a SQLAlchemy exception into the domain DatabaseError."""
    if isinstance(exc, IntegrityError):
        return DatabaseError("Integrity constraint violated", "commit")
    if isinstance(exc, OperationalError):
        return DatabaseError("Connection or operational error", operation)
    if isinstance(exc, DBAPIError):
        return DatabaseError("Database driver error", operation)
    return DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error: {e}")
            raise map_db_error(e)
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def connect_with_retry(
        self, retry_delay_seconds: float, max_attempts: int | None = None,
    ) -> bool:
        """Probe the store until it answers, sleeping a fixed delay between attempts."""
        attempt = 0
        while max_attempts is None or attempt < max_attempts:
            attempt += 1
            if await self.health_check():
                logger.info(
                    "Database connection established", extra={"attempt": attempt},
                )
                return True
            logger.warning(
                f"Database unavailable, retrying in {retry_delay_seconds}s",
                extra={"attempt": attempt},
            )
            await asyncio.sleep(retry_delay_seconds)
        return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise DatabaseError("Database not initialized", "connect")
    async with db_manager.session() as session:
        yield session
