"""Loguru configuration and stdlib logging bridge."""
from __future__ import annotations

import logging
import sys

from loguru import logger

from app.config import Settings


class InterceptHandler(logging.Handler):
    """Forward records emitted through :mod:`logging` to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Settings) -> None:
    """Install the loguru sink and route third-party loggers through it."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        serialize=settings.LOG_JSON,
        backtrace=settings.ENVIRONMENT != "production",
        diagnose=settings.ENVIRONMENT == "development",
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
    # SQL echo is noisy below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.debug("Logging configured", level=settings.LOG_LEVEL, json=settings.LOG_JSON)
