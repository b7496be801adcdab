from __future__ import annotations

import base64
import binascii
import mimetypes
import re
from pathlib import Path
from typing import Any

import httpx

from soniox_transcribe.contracts.artifacts import AudioFile, AudioInput
from soniox_transcribe.contracts.errors import InvalidInputError


DEFAULT_MEDIA_TYPE = "audio/mpeg"
DEFAULT_EXTENSION = "mp3"

_DATA_URI_MEDIA_TYPE = re.compile(r"data:([^;,]+)")


def extract_audio_url(audio: AudioInput) -> str | None:
    """Return the audio as a directly fetchable URL string, or None when it must be uploaded."""
    if isinstance(audio, httpx.URL):
        return str(audio)
    if isinstance(audio, str) and audio.startswith(("https://", "http://")):
        return audio
    return None


def _extension_for(media_type: str) -> str:
    _, _, subtype = media_type.partition("/")
    return subtype or DEFAULT_EXTENSION


def _decode_base64(data: str) -> bytes:
    compact = re.sub(r"[\t\n\f\r ]", "", data)
    compact += "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError(f"audio string is not valid base64: {exc}") from exc


def _from_data_uri(audio: str) -> AudioFile:
    header, _, payload = audio.partition(",")
    match = _DATA_URI_MEDIA_TYPE.match(header)
    media_type = match.group(1) if match else DEFAULT_MEDIA_TYPE
    return AudioFile(
        filename=f"audio.{_extension_for(media_type)}",
        content=_decode_base64(payload),
        media_type=media_type,
    )


def _from_path(path: Path) -> AudioFile:
    if not path.is_file():
        raise InvalidInputError(f"audio file not found: {path}")
    media_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MEDIA_TYPE
    return AudioFile(filename=path.name, content=path.read_bytes(), media_type=media_type)


def _from_file_object(handle: Any) -> AudioFile:
    content = handle.read()
    if not isinstance(content, (bytes, bytearray)):
        raise InvalidInputError("file-like audio must be opened in binary mode")

    media_type = getattr(handle, "content_type", None) or getattr(handle, "media_type", None)
    if not media_type:
        name = getattr(handle, "name", None)
        media_type = mimetypes.guess_type(str(name))[0] if isinstance(name, str) else None
    media_type = media_type or DEFAULT_MEDIA_TYPE
    return AudioFile(
        filename=f"audio.{_extension_for(media_type)}",
        content=bytes(content),
        media_type=media_type,
    )


def prepare_audio_file(audio: AudioInput) -> AudioFile:
    """
    Convert a non-URL audio input into an uploadable payload.

    - AudioFile: passed through unchanged
    - bytes / bytearray / memoryview: ``audio.mp3`` as ``audio/mpeg``
    - Path: read from disk, media type guessed from the suffix
    - binary file object: read, media type from ``content_type``/``media_type`` or its name
    - ``data:`` URI string: base64 payload after the comma, media type from the header
    - any other string: raw base64 audio as ``audio/mpeg``
    """
    if isinstance(audio, AudioFile):
        return audio
    if isinstance(audio, (bytes, bytearray, memoryview)):
        return AudioFile(filename=f"audio.{DEFAULT_EXTENSION}", content=bytes(audio), media_type=DEFAULT_MEDIA_TYPE)
    if isinstance(audio, Path):
        return _from_path(audio)
    if isinstance(audio, str):
        if audio.startswith("data:"):
            return _from_data_uri(audio)
        return AudioFile(
            filename=f"audio.{DEFAULT_EXTENSION}",
            content=_decode_base64(audio),
            media_type=DEFAULT_MEDIA_TYPE,
        )
    if callable(getattr(audio, "read", None)):
        return _from_file_object(audio)
    raise InvalidInputError(f"Invalid audio input type: {type(audio).__name__}")


__all__ = ["DEFAULT_MEDIA_TYPE", "extract_audio_url", "prepare_audio_file"]
