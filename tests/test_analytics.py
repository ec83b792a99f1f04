"""API tests for gameplay analytics events."""
from __future__ import annotations

import uuid

import pytest

TIMESTAMP = "2024-05-01T09:00:00.000Z"


def _word_seen(player_id, word_id, **overrides):
    event = {
        "type": "word_seen",
        "playerId": str(player_id),
        "gameId": "memory",
        "timestamp": TIMESTAMP,
        "wordId": str(word_id),
        "result": "correct",
    }
    event.update(overrides)
    return event


@pytest.mark.asyncio
async def test_record_word_seen_event(async_client, player, garden_words):
    response = await async_client.post(
        "/api/analytics", json=_word_seen(player.id, garden_words[0].id)
    )

    assert response.status_code == 201
    event = response.json()["event"]
    assert event["type"] == "word_seen"
    assert event["result"] == "correct"
    uuid.UUID(event["eventId"])


@pytest.mark.asyncio
async def test_record_played_game_event(async_client, player):
    response = await async_client.post(
        "/api/analytics",
        json={
            "type": "played_game",
            "playerId": str(player.id),
            "gameId": "catch",
            "timestamp": TIMESTAMP,
            "timeSpentMs": 42000,
            "score": 7,
        },
    )

    assert response.status_code == 201
    assert response.json()["event"]["timeSpentMs"] == 42000


@pytest.mark.asyncio
async def test_client_event_id_is_kept(async_client, player, garden_words):
    event_id = str(uuid.uuid4())

    response = await async_client.post(
        "/api/analytics",
        json={
            "type": "replay_audio",
            "eventId": event_id,
            "playerId": str(player.id),
            "gameId": "listen",
            "timestamp": TIMESTAMP,
            "wordId": str(garden_words[1].id),
        },
    )

    assert response.status_code == 201
    assert response.json()["event"]["eventId"] == event_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "word_clicked"},
        {"result": "maybe"},
        {"playerId": "not-a-uuid"},
    ],
)
async def test_invalid_events_are_rejected(async_client, player, garden_words, overrides):
    response = await async_client.post(
        "/api/analytics", json=_word_seen(player.id, garden_words[0].id, **overrides)
    )

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_list_events_filters_by_player(client, player, garden_words):
    other_player = uuid.uuid4()
    client.post("/api/analytics", json=_word_seen(player.id, garden_words[0].id))
    client.post("/api/analytics", json=_word_seen(player.id, garden_words[1].id, result="incorrect"))
    client.post("/api/analytics", json=_word_seen(other_player, garden_words[0].id))

    response = client.get("/api/analytics", params={"playerId": str(player.id)})

    assert response.status_code == 200
    events = response.json()["events"]
    assert len(events) == 2
    assert {event["playerId"] for event in events} == {str(player.id)}
    assert {event["payload"]["result"] for event in events} == {"correct", "incorrect"}
    assert len(client.get("/api/analytics").json()["events"]) == 3
