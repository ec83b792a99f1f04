"""Business logic for per-player word progress."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import Select, and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.scheduler import ProgressEntry, ScheduleItem, schedule_words
from app.db.models.player import Player
from app.db.models.progress import WordProgress
from app.db.models.word import Word
from app.schemas.progress import ProgressUpsert
from app.utils.exceptions import NotFoundError, ProgressConflictError


class ProgressService:
    """Read, merge and rank a player's word progress."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def _progress_query(self, player_id: uuid.UUID, word_id: uuid.UUID) -> Select:
        return select(WordProgress).where(
            and_(
                WordProgress.player_id == player_id,
                WordProgress.word_id == word_id,
            )
        )

    def _ensure_targets_exist(self, player_id: uuid.UUID, word_id: uuid.UUID) -> None:
        if self.db.get(Player, player_id) is None:
            raise NotFoundError("Player not found", {"id": str(player_id)})
        if self.db.get(Word, word_id) is None:
            raise NotFoundError("Word not found", {"id": str(word_id)})

    def get_progress(self, *, player_id: uuid.UUID, word_id: uuid.UUID) -> WordProgress | None:
        return self.db.scalars(self._progress_query(player_id, word_id)).first()

    def list_for_player(self, player_id: uuid.UUID) -> list[WordProgress]:
        """Return every progress row recorded for ``player_id``."""

        stmt = (
            select(WordProgress)
            .where(WordProgress.player_id == player_id)
            .order_by(WordProgress.created_at.asc(), WordProgress.word_id.asc())
        )
        return list(self.db.scalars(stmt))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def _commit(self, progress: WordProgress) -> WordProgress:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ProgressConflictError(
                "Progress was written concurrently, retry the request",
                {"playerId": str(progress.player_id), "wordId": str(progress.word_id)},
            ) from exc
        self.db.refresh(progress)
        return progress

    def upsert(self, payload: ProgressUpsert, *, now: datetime | None = None) -> WordProgress:
        """Insert or merge absolute counters for a (player, word) pair."""

        self._ensure_targets_exist(payload.player_id, payload.word_id)
        last_seen = payload.last_seen or now or datetime.now(timezone.utc)

        progress = self.get_progress(player_id=payload.player_id, word_id=payload.word_id)
        if progress is None:
            progress = WordProgress(
                id=payload.id or uuid.uuid4(),
                player_id=payload.player_id,
                word_id=payload.word_id,
                correct_count=payload.correct_count,
                incorrect_count=payload.incorrect_count,
                last_seen=last_seen,
            )
            self.db.add(progress)
        else:
            if (
                payload.correct_count < (progress.correct_count or 0)
                or payload.incorrect_count < (progress.incorrect_count or 0)
            ):
                raise ProgressConflictError(
                    "Progress counters cannot decrease",
                    {
                        "correctCount": progress.correct_count,
                        "incorrectCount": progress.incorrect_count,
                    },
                )
            progress.correct_count = payload.correct_count
            progress.incorrect_count = payload.incorrect_count
            progress.last_seen = last_seen

        progress = self._commit(progress)
        logger.info(
            "Progress upserted",
            player_id=str(progress.player_id),
            word_id=str(progress.word_id),
            correct=progress.correct_count,
            incorrect=progress.incorrect_count,
        )
        return progress

    def record_attempt(
        self,
        *,
        player_id: uuid.UUID,
        word_id: uuid.UUID,
        correct: bool,
        seen_at: datetime | None = None,
    ) -> WordProgress:
        """Count one answer, creating the row on the first attempt."""

        self._ensure_targets_exist(player_id, word_id)
        progress = self.get_progress(player_id=player_id, word_id=word_id)
        if progress is None:
            progress = WordProgress(
                player_id=player_id, word_id=word_id, correct_count=0, incorrect_count=0
            )
            self.db.add(progress)
        progress.record_attempt(correct, seen_at=seen_at)
        return self._commit(progress)

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def schedule(
        self,
        *,
        player_id: uuid.UUID,
        limit: int | None = None,
        now: datetime | None = None,
    ) -> list[ScheduleItem]:
        """Rank the player's words by practice priority."""

        entries = [
            ProgressEntry(
                word_id=row.word_id,
                correct_count=row.correct_count or 0,
                incorrect_count=row.incorrect_count or 0,
                last_seen=row.last_seen,
            )
            for row in self.list_for_player(player_id)
        ]
        schedule = schedule_words(entries, limit=limit, now=now)
        logger.debug(
            "Schedule computed",
            player_id=str(player_id),
            candidates=len(entries),
            returned=len(schedule),
        )
        return schedule
