"""Per-category logging levels for the proxy manager.

Three categories can be tuned independently of the root level: database
drivers and SQL, the uvicorn server, and the application services that
log proxy resets, session writes and account changes.

    from proxy_manager.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from proxy_manager.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"

# Settings field -> loggers it controls
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_services": ("proxy_manager.application.services",),
}


def resolve_levels(settings: Settings) -> dict[str, int]:
    """Map every managed logger name to the numeric level configured for it."""
    levels: dict[str, int] = {}
    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = _parse_level(getattr(settings, field_name))
        for logger_name in logger_names:
            levels[logger_name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        # uvicorn installs its own handlers; bare scripts and tests do not
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for logger_name, level in resolve_levels(settings).items():
        logging.getLogger(logger_name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s services=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_services,
    )


def _parse_level(raw: str) -> int:
    """Unknown level names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
