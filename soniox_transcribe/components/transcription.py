from __future__ import annotations

from soniox_transcribe.adapters.transcription import TranscriptionProvider
from soniox_transcribe.contracts.artifacts import TranscriptionRequest, TranscriptionResult
from soniox_transcribe.contracts.errors import InvalidInputError, TranscriptionError


def _validate_request(request: TranscriptionRequest) -> None:
    if request.audio is None:
        raise InvalidInputError("audio is required for transcription")
    if isinstance(request.audio, (str, bytes, bytearray)) and not request.audio:
        raise InvalidInputError("audio must not be empty")


async def transcribe_audio(request: TranscriptionRequest, provider: TranscriptionProvider) -> TranscriptionResult:
    """
    Provider-agnostic transcription component.
    Adapters own upload/job lifecycle and response normalization.
    """
    _validate_request(request)
    result = await provider.transcribe(request)
    if request.model and result.model != request.model:
        raise TranscriptionError(
            f"provider {provider.name!r} returned model={result.model!r}, expected {request.model!r}"
        )
    if result.segments is not None and not result.segments:
        raise TranscriptionError(f"provider {provider.name!r} returned an empty segment list instead of None")
    return result


__all__ = ["transcribe_audio"]
