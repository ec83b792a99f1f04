"""Tests for the sample word seeding script."""
from __future__ import annotations

import json
import uuid

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from app.db import models  # noqa: F401  # registers tables on Base.metadata
from app.db.base import Base
from app.db.models import Word
from scripts.seed_words import clean_words, seed_words


def test_clean_words_drops_blank_optional_fields():
    words = clean_words(
        [
            {
                "text": "moon",
                "pos": "noun",
                "audioUrl": "",
                "imageUrl": "",
                "exampleSentence": "",
                "level": 1,
            },
            {"text": "run", "pos": "verb", "exampleSentence": "I run fast."},
        ]
    )

    assert words[0].audio_url is None
    assert words[0].image_url is None
    assert words[0].example_sentence is None
    assert words[1].example_sentence == "I run fast."


def test_seed_words_upserts_file(tmp_path, monkeypatch):
    database = tmp_path / "seed.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{database}")
    engine = create_engine(f"sqlite:///{database}")
    Base.metadata.create_all(bind=engine)

    moon_id = str(uuid.uuid4())
    path = tmp_path / "words.sample.json"
    path.write_text(
        json.dumps(
            {
                "words": [
                    {"id": moon_id, "text": "moon", "pos": "noun", "level": 1, "imageUrl": ""},
                    {"id": str(uuid.uuid4()), "text": "run", "pos": "verb", "level": 1},
                ]
            }
        ),
        encoding="utf-8",
    )

    assert seed_words(path) == 2
    assert seed_words(path) == 2

    with Session(engine) as db:
        words = db.scalars(select(Word).order_by(Word.text)).all()
    engine.dispose()

    assert [word.text for word in words] == ["moon", "run"]
    assert str(words[0].id) == moon_id
    assert words[0].image_url is None
