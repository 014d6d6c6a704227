"""SQLAlchemy database session and engine configuration.

SQL statement logging goes through the ``sqlalchemy.engine`` logger, whose
level is set by ``log_level_sql``; the engine itself never echoes.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from proxy_manager.config import get_settings

_ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to its async-driver form."""
    for prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return url.replace(prefix, async_prefix, 1)
    return url


def is_postgres_url(url: str) -> bool:
    return get_async_url(url).startswith("postgresql+asyncpg://")


settings = get_settings()

engine = create_async_engine(
    get_async_url(settings.database_url),
    pool_pre_ping=is_postgres_url(settings.database_url),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session and transaction per request."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
