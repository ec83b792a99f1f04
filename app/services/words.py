"""Service helpers for vocabulary words."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.word import Word
from app.schemas.word import WordBulkItem, WordCreate
from app.utils.exceptions import NotFoundError


def _url(value: object | None) -> str | None:
    return str(value) if value is not None else None


class WordService:
    """Create, query and bulk-load vocabulary words."""

    def __init__(self, db: Session):
        self.db = db

    def list_words(self, *, week: int | None = None) -> list[Word]:
        """Return words ordered alphabetically, optionally for a single week."""

        stmt = select(Word).order_by(Word.text)
        if week is not None:
            stmt = stmt.where(Word.level == week)
        return list(self.db.scalars(stmt))

    def get_word(self, word_id: uuid.UUID) -> Word:
        """Retrieve a single word by identifier."""

        word = self.db.get(Word, word_id)
        if not word:
            raise NotFoundError("Word not found", {"id": str(word_id)})
        return word

    def create_word(self, payload: WordCreate) -> Word:
        word = Word(
            id=payload.id or uuid.uuid4(),
            text=payload.text,
            pos=payload.pos,
            transcription=payload.transcription,
            example_sentence=payload.example_sentence,
            level=payload.level,
            image_url=_url(payload.image_url),
            audio_url=_url(payload.audio_url),
            ai_generated=payload.ai_generated,
        )
        self.db.add(word)
        self.db.commit()
        self.db.refresh(word)
        logger.info("Word created", word_id=str(word.id), text=word.text)
        return word

    def upsert_words(self, items: list[WordBulkItem]) -> list[Word]:
        """Insert or overwrite words by id.

        Missing fields are filled with empty defaults, so an upsert replaces
        every column of an existing row.
        """

        words: list[Word] = []
        for item in items:
            values = {
                "text": item.text or "",
                "pos": item.pos or "noun",
                "transcription": item.transcription or "",
                "example_sentence": item.example_sentence,
                "level": item.level or 0,
                "image_url": _url(item.image_url),
                "audio_url": _url(item.audio_url),
                "ai_generated": bool(item.ai_generated),
            }
            word_id = item.id or uuid.uuid4()
            word = self.db.get(Word, word_id)
            if word is None:
                word = Word(id=word_id, **values)
                self.db.add(word)
            else:
                for field, value in values.items():
                    setattr(word, field, value)
            words.append(word)

        self.db.commit()
        for word in words:
            self.db.refresh(word)
        logger.info("Words upserted", count=len(words))
        return words

    def delete_word(self, word_id: uuid.UUID) -> int:
        """Delete a word and its progress rows; return the number removed."""

        word = self.db.get(Word, word_id)
        if word is None:
            return 0
        self.db.delete(word)
        self.db.commit()
        logger.info("Word deleted", word_id=str(word_id))
        return 1
