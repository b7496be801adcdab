from __future__ import annotations

from .soniox_transcription import (
    SonioxTranscriptionAdapter,
    SonioxTranscriptionConfig,
    create_soniox_transcription,
    soniox_transcription,
)
from .transcription import TranscriptionProvider

__all__ = [
    "TranscriptionProvider",
    "SonioxTranscriptionAdapter",
    "SonioxTranscriptionConfig",
    "create_soniox_transcription",
    "soniox_transcription",
]
