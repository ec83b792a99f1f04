"""API router for the game backend."""
from fastapi import APIRouter, Depends

from app.api import deps
from app.api.v1.endpoints import (
    analytics,
    media,
    players,
    progress,
    sample_words,
    sessions,
    words,
)


api_router = APIRouter(dependencies=[Depends(deps.require_parent)])
api_router.include_router(words.router)
api_router.include_router(players.router)
api_router.include_router(sessions.router)
api_router.include_router(progress.router)
api_router.include_router(analytics.router)
api_router.include_router(media.router)
api_router.include_router(sample_words.router)
