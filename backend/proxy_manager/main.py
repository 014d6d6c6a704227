"""Proxy Manager API: application factory and server entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from proxy_manager.config import Settings, get_settings
from proxy_manager.infrastructure.database import Base, engine
from proxy_manager.infrastructure.database.session import is_postgres_url
from proxy_manager.infrastructure.logging.log_config import setup_logging
from proxy_manager.presentation.api.v1.router import router as api_router

logger = logging.getLogger(__name__)


async def _create_postgres_database(settings: Settings) -> None:
    """Issue CREATE DATABASE for the configured Postgres database when it is missing.

    Runs against the ``postgres`` maintenance database. Failures are logged
    and left for ``create_all`` to report.
    """
    import asyncpg

    url = make_url(settings.database_url)
    if not url.database:
        return

    dsn = url.set(drivername="postgresql", database="postgres").render_as_string(hide_password=False)
    try:
        conn = await asyncpg.connect(dsn)
    except (OSError, asyncpg.PostgresError) as exc:
        logger.warning("Cannot reach Postgres to check database %r: %s", url.database, exc)
        return

    try:
        if await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", url.database):
            return
        # not allowed inside a transaction block
        await conn.execute(f'CREATE DATABASE "{url.database}"')
        logger.info("Created database %r", url.database)
    except asyncpg.PostgresError as exc:
        logger.warning("Could not create database %r: %s", url.database, exc)
    finally:
        await conn.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings)

    if is_postgres_url(settings.database_url):
        await _create_postgres_database(settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "%s %s ready (env=%s, tables=%s)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        ", ".join(sorted(Base.metadata.tables)),
    )

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(api_router)
    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "proxy_manager.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.app_env == "development",
        log_level=settings.log_level_uvicorn.lower(),
    )


if __name__ == "__main__":
    run()
