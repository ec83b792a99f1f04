"""Player profile endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api import deps
from app.schemas import (
    PlayerCreate,
    PlayerListResponse,
    PlayerRead,
    PlayerResponse,
    PlayerUpdate,
)
from app.services.players import PlayerService

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=PlayerListResponse)
def list_players(
    parent_id: uuid.UUID | None = Query(default=None, alias="parentId"),
    db: Session = Depends(deps.get_db),
) -> PlayerListResponse:
    """Return players ordered by recency."""

    players = PlayerService(db).list_players(parent_id=parent_id)
    return PlayerListResponse(players=[PlayerRead.model_validate(player) for player in players])


@router.get("/{player_id}", response_model=PlayerResponse)
def read_player(player_id: uuid.UUID, db: Session = Depends(deps.get_db)) -> PlayerResponse:
    player = PlayerService(db).get(player_id)
    return PlayerResponse(player=PlayerRead.model_validate(player))


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
def create_player(payload: PlayerCreate, db: Session = Depends(deps.get_db)) -> PlayerResponse:
    player = PlayerService(db).create(payload)
    return PlayerResponse(player=PlayerRead.model_validate(player))


@router.patch("/{player_id}", response_model=PlayerResponse)
def update_player(
    player_id: uuid.UUID,
    payload: PlayerUpdate,
    db: Session = Depends(deps.get_db),
) -> PlayerResponse:
    """Rename a player or change their avatar."""

    player = PlayerService(db).update(player_id, payload)
    return PlayerResponse(player=PlayerRead.model_validate(player))


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_player(player_id: uuid.UUID, db: Session = Depends(deps.get_db)) -> Response:
    PlayerService(db).delete(player_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
