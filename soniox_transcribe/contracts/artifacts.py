from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Mapping, TypeAlias

import httpx

from .options import ProviderOptions


@dataclass(frozen=True, slots=True)
class AudioFile:
    """In-memory audio payload ready for multipart upload."""

    filename: str
    content: bytes
    media_type: str = "audio/mpeg"


AudioInput: TypeAlias = str | httpx.URL | bytes | bytearray | memoryview | Path | AudioFile | IO[bytes]


@dataclass(frozen=True, slots=True)
class TranscriptionRequest:
    audio: AudioInput
    model: str | None = None
    language: str | None = None
    model_options: ProviderOptions | Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class TranscriptToken:
    text: str
    start_ms: float | None = None
    end_ms: float | None = None
    confidence: float | None = None
    speaker: int | float | str | None = None
    language: str | None = None
    translation_status: str | None = None


@dataclass(frozen=True, slots=True)
class TranscriptSegment:
    id: int
    start: float
    end: float
    text: str
    confidence: float | None = None
    speaker: str | None = None


@dataclass(frozen=True, slots=True)
class TranscriptionResult:
    id: str
    model: str
    text: str
    language: str | None = None
    duration: float | None = None
    segments: list[TranscriptSegment] | None = None
    provider_metadata: dict[str, Any] | None = None
