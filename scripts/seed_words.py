"""Seed the words table from the sample words JSON file."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.config import get_settings
from app.core.logging import configure_logging
from app.db.session import build_engine, build_session_factory
from app.schemas.word import WordBulkItem
from app.services.words import WordService

BLANKABLE_FIELDS = ("audioUrl", "imageUrl", "exampleSentence")


def clean_words(raw_words: list[dict[str, Any]]) -> list[WordBulkItem]:
    """Drop empty optional strings so they are stored as NULL."""

    cleaned: list[WordBulkItem] = []
    for raw in raw_words:
        record = dict(raw)
        for field in BLANKABLE_FIELDS:
            if not record.get(field):
                record.pop(field, None)
        cleaned.append(WordBulkItem.model_validate(record))
    return cleaned


def seed_words(path: Path) -> int:
    """Upsert every word in ``path`` and return how many were written."""

    settings = get_settings()
    engine = build_engine(settings)
    session_factory = build_session_factory(engine)

    data = json.loads(path.read_text(encoding="utf-8"))
    words = clean_words(data.get("words", []))
    logger.info("Found words in sample file", count=len(words), path=str(path))

    db = session_factory()
    try:
        written = WordService(db).upsert_words(words)
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()
        engine.dispose()

    logger.info("Seeded words", count=len(written))
    return len(written)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings)
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=settings.SAMPLE_WORDS_PATH,
        help='JSON file shaped like {"words": [...]}',
    )
    args = parser.parse_args(argv)
    try:
        seed_words(args.path)
    except Exception:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
