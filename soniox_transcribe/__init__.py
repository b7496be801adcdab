"""Soniox async speech-to-text adapter."""

from __future__ import annotations

from .adapters import (
    SonioxTranscriptionAdapter,
    SonioxTranscriptionConfig,
    TranscriptionProvider,
    create_soniox_transcription,
    soniox_transcription,
)
from .config import DEFAULT_SONIOX_BASE_URL, SONIOX_API_KEY_ENV_VAR, get_soniox_api_key_from_env
from .contracts import (
    AudioFile,
    ConfigurationError,
    InvalidInputError,
    JobFailureError,
    ProviderOptions,
    ResponseParseError,
    SonioxApiError,
    TranscriptionError,
    TranscriptionRequest,
    TranscriptionResult,
    TranscriptionTimeoutError,
    TranscriptSegment,
)
from .models import SONIOX_TRANSCRIPTION_MODELS

__all__ = [
    "AudioFile",
    "ConfigurationError",
    "DEFAULT_SONIOX_BASE_URL",
    "InvalidInputError",
    "JobFailureError",
    "ProviderOptions",
    "ResponseParseError",
    "SONIOX_API_KEY_ENV_VAR",
    "SONIOX_TRANSCRIPTION_MODELS",
    "SonioxApiError",
    "SonioxTranscriptionAdapter",
    "SonioxTranscriptionConfig",
    "TranscriptSegment",
    "TranscriptionError",
    "TranscriptionProvider",
    "TranscriptionRequest",
    "TranscriptionResult",
    "TranscriptionTimeoutError",
    "create_soniox_transcription",
    "get_soniox_api_key_from_env",
    "soniox_transcription",
]
