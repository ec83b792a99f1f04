"""JSON-file store backing the sample words dashboard."""
from __future__ import annotations

import json
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from app.schemas.sample_word import SampleWord, SampleWordCreate, SampleWordUpdate
from app.utils.exceptions import NotFoundError


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class SampleWordStore:
    """Read-modify-write access to a ``{"words": [...]}`` JSON file."""

    _lock = threading.Lock()

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> list[SampleWord]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text(encoding="utf-8"))
        return [SampleWord.model_validate(item) for item in data.get("words", [])]

    def _write(self, words: list[SampleWord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"words": [word.model_dump(by_alias=True, exclude_none=True) for word in words]}
        self.path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def list_words(self) -> list[SampleWord]:
        with self._lock:
            return self._read()

    def create(self, payload: SampleWordCreate) -> SampleWord:
        now = _now_iso()
        word = SampleWord(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **payload.model_dump(),
        )
        with self._lock:
            words = self._read()
            words.append(word)
            self._write(words)
        logger.info("Sample word added", word_id=word.id, text=word.text)
        return word

    def update(self, word_id: str, payload: SampleWordUpdate) -> SampleWord:
        with self._lock:
            words = self._read()
            for index, word in enumerate(words):
                if word.id == word_id:
                    break
            else:
                raise NotFoundError("Sample word not found", {"id": word_id})

            changes = payload.model_dump(exclude_unset=True)
            changes["updated_at"] = _now_iso()
            updated = SampleWord.model_validate({**word.model_dump(), **changes})
            words[index] = updated
            self._write(words)
        return updated

    def delete(self, word_id: str) -> None:
        with self._lock:
            words = self._read()
            remaining = [word for word in words if word.id != word_id]
            if len(remaining) == len(words):
                raise NotFoundError("Sample word not found", {"id": word_id})
            self._write(remaining)
        logger.info("Sample word removed", word_id=word_id)
