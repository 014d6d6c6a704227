"""Unit tests for the per-category log level wiring."""

import logging

from proxy_manager.config import Settings
from proxy_manager.infrastructure.logging.log_config import resolve_levels, setup_logging


def test_each_category_controls_its_loggers():
    settings = Settings(log_level_sql="ERROR", log_level_uvicorn="debug", log_level_services="WARNING")
    levels = resolve_levels(settings)

    assert levels["sqlalchemy.engine"] == logging.ERROR
    assert levels["asyncpg"] == logging.ERROR
    assert levels["uvicorn.access"] == logging.DEBUG
    assert levels["proxy_manager.application.services"] == logging.WARNING


def test_unknown_level_name_falls_back_to_info():
    levels = resolve_levels(Settings(log_level_sql="chatty"))
    assert levels["sqlalchemy.engine"] == logging.INFO


def test_setup_logging_applies_levels():
    setup_logging(Settings(log_level_services="ERROR"))
    assert logging.getLogger("proxy_manager.application.services").level == logging.ERROR
