"""Pydantic schemas package."""

from app.schemas.analytics import (
    AnalyticsEventCreate,
    AnalyticsEventListResponse,
    AnalyticsEventRead,
    AnalyticsEventResponse,
    AnalyticsEventUnion,
    PlayedGameEvent,
    ReplayAudioEvent,
    WordSeenEvent,
)
from app.schemas.media import (
    AudioRequest,
    AudioResponse,
    GeneratedAudio,
    GeneratedImage,
    ImageRequest,
    ImageResponse,
)
from app.schemas.player import (
    PlayerCreate,
    PlayerListResponse,
    PlayerRead,
    PlayerResponse,
    PlayerUpdate,
)
from app.schemas.progress import (
    AttemptRequest,
    ProgressListResponse,
    ProgressRead,
    ProgressResponse,
    ProgressUpsert,
    ScheduleItemRead,
    ScheduleRequest,
    ScheduleResponse,
)
from app.schemas.sample_word import (
    SampleWord,
    SampleWordCreate,
    SampleWordListResponse,
    SampleWordResponse,
    SampleWordUpdate,
)
from app.schemas.session import SessionCreate, SessionRead, SessionResponse, SessionUpdate
from app.schemas.word import (
    WordBulkItem,
    WordBulkRequest,
    WordCreate,
    WordListResponse,
    WordRead,
    WordResponse,
)

__all__ = [
    "AnalyticsEventCreate",
    "AnalyticsEventListResponse",
    "AnalyticsEventRead",
    "AnalyticsEventResponse",
    "AnalyticsEventUnion",
    "PlayedGameEvent",
    "ReplayAudioEvent",
    "WordSeenEvent",
    "AudioRequest",
    "AudioResponse",
    "GeneratedAudio",
    "GeneratedImage",
    "ImageRequest",
    "ImageResponse",
    "PlayerCreate",
    "PlayerListResponse",
    "PlayerRead",
    "PlayerResponse",
    "PlayerUpdate",
    "AttemptRequest",
    "ProgressListResponse",
    "ProgressRead",
    "ProgressResponse",
    "ProgressUpsert",
    "ScheduleItemRead",
    "ScheduleRequest",
    "ScheduleResponse",
    "SampleWord",
    "SampleWordCreate",
    "SampleWordListResponse",
    "SampleWordResponse",
    "SampleWordUpdate",
    "SessionCreate",
    "SessionRead",
    "SessionResponse",
    "SessionUpdate",
    "WordBulkItem",
    "WordBulkRequest",
    "WordCreate",
    "WordListResponse",
    "WordRead",
    "WordResponse",
]
