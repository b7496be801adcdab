from __future__ import annotations

from typing import Protocol

from soniox_transcribe.contracts.artifacts import TranscriptionRequest, TranscriptionResult


class TranscriptionProvider(Protocol):
    """Provider adapter boundary for one-shot transcription."""

    name: str

    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """Return a normalized transcription result for the request's audio."""


__all__ = ["TranscriptionProvider"]
