"""Image and audio generation endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api import deps
from app.schemas import AudioRequest, AudioResponse, ImageRequest, ImageResponse
from app.services.media import MediaService

router = APIRouter(tags=["media"])


@router.post("/generate-image", response_model=ImageResponse, response_model_exclude_none=True)
def generate_image(
    payload: ImageRequest,
    service: MediaService = Depends(deps.get_media_service),
) -> ImageResponse:
    return ImageResponse(image=service.generate_image(prompt=payload.prompt, style=payload.style))


@router.post("/generate-audio", response_model=AudioResponse, response_model_exclude_none=True)
def generate_audio(
    payload: AudioRequest,
    service: MediaService = Depends(deps.get_media_service),
) -> AudioResponse:
    return AudioResponse(audio=service.generate_audio(prompt=payload.prompt, voice=payload.voice))
