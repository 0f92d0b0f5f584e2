from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from pph21.config import Settings, get_settings
from pph21.tax.ter2024 import TER_TABLES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _open_log_sink(logger: logging.Logger, log_dir: str, app_label: str) -> logging.Handler | None:
    logs_dir = Path(log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def configure_logging(settings: Settings, app_label: str = "pph21") -> logging.Handler | None:
    """Set the package log level and attach a file sink when ``log_dir`` is configured."""
    logger = logging.getLogger("pph21")
    logger.setLevel(settings.log_level)
    if not settings.log_dir:
        return None
    return _open_log_sink(logger, settings.log_dir, app_label)


def release_logging(handler: logging.Handler | None) -> None:
    if handler is None:
        return
    logging.getLogger("pph21").removeHandler(handler)
    handler.close()


def build_application_lifespan(app_label: str) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("pph21")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        log_handler = configure_logging(settings, app_label)

        app.state.settings = settings
        app.state.log_handler = log_handler
        app.state.ter_table_sizes = {category.value: len(table) for category, table in TER_TABLES.items()}

        logger.info("Startup complete: ter_tables=%s", app.state.ter_table_sizes)
        try:
            yield
        finally:
            release_logging(log_handler)
            for attr in ("settings", "log_handler", "ter_table_sizes"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)
            logger.info("Shutdown complete")

    return _lifespan


__all__ = [
    "LOG_FORMAT",
    "build_application_lifespan",
    "configure_logging",
    "release_logging",
]
