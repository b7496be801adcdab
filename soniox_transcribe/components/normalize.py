from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from soniox_transcribe.contracts.artifacts import TranscriptSegment, TranscriptToken
from soniox_transcribe.contracts.errors import ResponseParseError


# Translation statuses that still denote spoken (timestamped) audio.
_TRANSCRIPTION_STATUSES = frozenset({None, "original", "none"})


@dataclass(frozen=True, slots=True)
class NormalizedTranscript:
    language: str | None
    duration: float | None
    segments: list[TranscriptSegment] | None


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _str_or_none(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _speaker_or_none(value: Any) -> int | float | str | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (int, float, str)):
        return value
    return None


def parse_tokens(raw_tokens: Any) -> list[TranscriptToken]:
    if raw_tokens in (None, ""):
        return []
    if not isinstance(raw_tokens, list):
        raise ResponseParseError("Soniox transcript 'tokens' must be a list when provided")

    tokens: list[TranscriptToken] = []
    for raw in raw_tokens:
        if not isinstance(raw, Mapping):
            raise ResponseParseError("Soniox transcript tokens must be JSON objects")
        tokens.append(
            TranscriptToken(
                text=str(raw.get("text") or ""),
                start_ms=_float_or_none(raw.get("start_ms")),
                end_ms=_float_or_none(raw.get("end_ms")),
                confidence=_float_or_none(raw.get("confidence")),
                speaker=_speaker_or_none(raw.get("speaker")),
                language=_str_or_none(raw.get("language")),
                translation_status=_str_or_none(raw.get("translation_status")),
            )
        )
    return tokens


def _is_segment_token(token: TranscriptToken) -> bool:
    if token.start_ms is None or token.end_ms is None:
        return False
    return token.translation_status in _TRANSCRIPTION_STATUSES


def build_segments(tokens: Iterable[TranscriptToken]) -> list[TranscriptSegment] | None:
    """
    Turn timestamped transcription tokens into segments, keeping source order.
    Translation tokens and tokens without both timestamps are dropped.
    Returns None when nothing qualifies.
    """
    segments = [
        TranscriptSegment(
            id=index,
            start=token.start_ms / 1000,  # type: ignore[operator]
            end=token.end_ms / 1000,  # type: ignore[operator]
            text=token.text,
            confidence=token.confidence,
            speaker=_str_or_none(token.speaker),
        )
        for index, token in enumerate(t for t in tokens if _is_segment_token(t))
    ]
    return segments or None


def detect_language(tokens: Iterable[TranscriptToken], fallback: str | None = None) -> str | None:
    """Most frequent token language; ties go to the language seen first."""
    counts = Counter(token.language for token in tokens if token.language)
    if not counts:
        return fallback
    language, _ = counts.most_common(1)[0]
    return language


def duration_from_ms(duration_ms: Any) -> float | None:
    value = _float_or_none(duration_ms)
    if value is None:
        return None
    return value / 1000


def normalize_transcript(
    tokens: list[TranscriptToken],
    status: Mapping[str, Any],
    language_hint: str | None,
) -> NormalizedTranscript:
    return NormalizedTranscript(
        language=detect_language(tokens, fallback=language_hint),
        duration=duration_from_ms(status.get("audio_duration_ms")),
        segments=build_segments(tokens),
    )


__all__ = [
    "NormalizedTranscript",
    "build_segments",
    "detect_language",
    "duration_from_ms",
    "normalize_transcript",
    "parse_tokens",
]
