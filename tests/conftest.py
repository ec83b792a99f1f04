"""Pytest fixtures for API tests."""

from collections.abc import AsyncGenerator, Callable, Generator
from datetime import datetime, timezone

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.config import Settings
from app.db import models  # noqa: F401  # Imported for side effects
from app.db.base import Base
from app.db.models import Player, Word, WordProgress
from app.main import create_app


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine, expire_on_commit=False
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def make_settings(tmp_path) -> Callable[..., Settings]:
    def factory(**overrides) -> Settings:
        values = {
            "DATABASE_URL": "sqlite://",
            "ENVIRONMENT": "test",
            "LOG_LEVEL": "WARNING",
            "REDIS_URL": None,
            "PARENT_AUTH_SECRET": None,
            "CLOUD_FLARE_ACCOUNT_ID": None,
            "CLOUD_FLARE_API_TOKEN": None,
            "SAMPLE_WORDS_PATH": tmp_path / "words.sample.json",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return factory


@pytest.fixture()
def make_app(make_settings, db_session) -> Callable[..., FastAPI]:
    def factory(**overrides) -> FastAPI:
        app = create_app(make_settings(**overrides))

        def override_get_db() -> Generator[Session, None, None]:
            yield db_session

        app.dependency_overrides[get_db] = override_get_db
        return app

    return factory


@pytest.fixture()
def client(make_app) -> Generator[TestClient, None, None]:
    with TestClient(make_app()) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def async_client(make_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=make_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def player(db_session) -> Player:
    player = Player(name="Mia")
    db_session.add(player)
    db_session.commit()
    db_session.refresh(player)
    return player


@pytest.fixture()
def garden_words(db_session) -> list[Word]:
    words = [
        Word(text="apple", pos="noun", transcription="ˈæpəl", level=1),
        Word(text="jump", pos="verb", transcription="dʒʌmp", level=1),
        Word(text="blue", pos="adjective", transcription="bluː", level=2),
    ]
    db_session.add_all(words)
    db_session.commit()
    for word in words:
        db_session.refresh(word)
    return words


@pytest.fixture()
def add_progress(db_session) -> Callable[..., WordProgress]:
    def factory(
        player: Player,
        word: Word,
        *,
        correct: int = 0,
        incorrect: int = 0,
        last_seen: datetime | None = None,
    ) -> WordProgress:
        progress = WordProgress(
            player_id=player.id,
            word_id=word.id,
            correct_count=correct,
            incorrect_count=incorrect,
            last_seen=last_seen or datetime.now(timezone.utc),
        )
        db_session.add(progress)
        db_session.commit()
        return progress

    return factory
