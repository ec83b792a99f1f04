"""Create all tables from the ORM metadata."""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.config import get_settings
from app.core.logging import configure_logging
from app.db import models  # noqa: F401  # registers tables on Base.metadata
from app.db.base import Base
from app.db.session import build_engine


def create_tables() -> None:
    settings = get_settings()
    configure_logging(settings)
    engine = build_engine(settings)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created", tables=sorted(Base.metadata.tables))
    finally:
        engine.dispose()


if __name__ == "__main__":
    create_tables()
