"""Service layer for player profiles."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.player import Player
from app.schemas.player import PlayerCreate, PlayerUpdate
from app.utils.exceptions import NotFoundError


class PlayerService:
    """Encapsulates player data access operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_players(self, *, parent_id: uuid.UUID | None = None) -> list[Player]:
        """Return players newest first, optionally for one parent."""

        stmt = select(Player).order_by(Player.created_at.desc())
        if parent_id is not None:
            stmt = stmt.where(Player.parent_id == parent_id)
        return list(self.db.scalars(stmt))

    def get(self, player_id: uuid.UUID) -> Player:
        """Return a player by identifier or raise ``NotFoundError``."""

        player = self.db.get(Player, player_id)
        if not player:
            raise NotFoundError("Player not found", {"id": str(player_id)})
        return player

    def create(self, payload: PlayerCreate) -> Player:
        player = Player(
            id=payload.id or uuid.uuid4(),
            name=payload.name,
            parent_id=payload.parent_id or uuid.uuid4(),
            avatar_url=str(payload.avatar_url) if payload.avatar_url else None,
        )
        self.db.add(player)
        self.db.commit()
        self.db.refresh(player)
        logger.info("Player created", player_id=str(player.id))
        return player

    def update(self, player_id: uuid.UUID, payload: PlayerUpdate) -> Player:
        """Persist profile changes and return the updated entity."""

        player = self.get(player_id)
        update_data = payload.model_dump(exclude_unset=True)
        if "avatar_url" in update_data and update_data["avatar_url"] is not None:
            update_data["avatar_url"] = str(update_data["avatar_url"])
        for field, value in update_data.items():
            setattr(player, field, value)

        self.db.add(player)
        self.db.commit()
        self.db.refresh(player)
        return player

    def delete(self, player_id: uuid.UUID) -> int:
        """Delete a player with its sessions and progress."""

        player = self.db.get(Player, player_id)
        if player is None:
            return 0
        self.db.delete(player)
        self.db.commit()
        logger.info("Player deleted", player_id=str(player_id))
        return 1
