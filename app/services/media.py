"""Placeholder image and audio generation.

Records are returned immediately. Without Cloudflare credentials the URLs
point at static placeholders, and otherwise the record is marked ``pending``.
"""
from __future__ import annotations

import uuid
from urllib.parse import quote

from loguru import logger

from app.config import Settings
from app.schemas.media import GeneratedAudio, GeneratedImage

PLACEHOLDER_BASE_URL = "https://example.com/placeholder"
CLOUDFLARE_IMAGE_URL = "https://api.cloudflare.com/account/image-id"
CLOUDFLARE_AUDIO_URL = "https://api.cloudflare.com/account/audio-id"
_URI_SAFE = "!'()*"


def _placeholder_url(prompt: str, extension: str) -> str:
    return f"{PLACEHOLDER_BASE_URL}/{quote(prompt, safe=_URI_SAFE)}.{extension}"


class MediaService:
    """Produce media generation records for the admin dashboard."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def generate_image(self, *, prompt: str, style: str | None = None) -> GeneratedImage:
        if not (self.settings.CLOUD_FLARE_ACCOUNT_ID and self.settings.CLOUD_FLARE_API_TOKEN):
            logger.debug("Cloudflare images not configured, returning placeholder")
            return GeneratedImage(
                id=uuid.uuid4(),
                prompt=prompt,
                style=style,
                url=_placeholder_url(prompt, "png"),
                status="stubbed",
            )
        return GeneratedImage(
            id=uuid.uuid4(), prompt=prompt, style=style, url=CLOUDFLARE_IMAGE_URL, status="pending"
        )

    def generate_audio(self, *, prompt: str, voice: str | None = None) -> GeneratedAudio:
        if not self.settings.CLOUD_FLARE_API_TOKEN:
            logger.debug("Cloudflare audio not configured, returning placeholder")
            return GeneratedAudio(
                id=uuid.uuid4(),
                prompt=prompt,
                voice=voice,
                url=_placeholder_url(prompt, "mp3"),
                status="stubbed",
            )
        return GeneratedAudio(
            id=uuid.uuid4(), prompt=prompt, voice=voice, url=CLOUDFLARE_AUDIO_URL, status="pending"
        )
