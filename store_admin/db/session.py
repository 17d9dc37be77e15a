"""
Database session management.

WHY: Each request works in its own AsyncSession. The session is committed
once the handler returns and rolled back if anything raised, so a request
that fails validation half-way leaves no partial writes behind.
"""

from typing import Any, AsyncGenerator, Dict
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from store_admin.core.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    """
    Pool options for the configured backend.

    SQLite (local development) uses SQLAlchemy's default pool and rejects
    pool sizing arguments, so those are only passed for server databases.
    """
    options: Dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=10, max_overflow=20)
    return options


engine = create_async_engine(
    settings.async_database_url,
    **_engine_options(settings.async_database_url),
)

# expire_on_commit=False keeps loaded attributes usable after commit.
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    Yields:
        AsyncSession: Database session for the request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
