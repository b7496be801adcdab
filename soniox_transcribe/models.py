from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


Modality: TypeAlias = Literal["text", "image", "audio", "video", "document"]


@dataclass(frozen=True, slots=True)
class ModelMeta:
    """Static capabilities of a Soniox model."""

    name: str
    input: tuple[Modality, ...]
    output: tuple[Modality, ...]


STT_ASYNC_V3 = ModelMeta(name="stt-async-v3", input=("audio",), output=("text",))

SONIOX_TRANSCRIPTION_MODELS: tuple[str, ...] = (STT_ASYNC_V3.name,)
DEFAULT_TRANSCRIPTION_MODEL = STT_ASYNC_V3.name

_MODELS_BY_NAME = {meta.name: meta for meta in (STT_ASYNC_V3,)}


def get_model_meta(name: str) -> ModelMeta | None:
    return _MODELS_BY_NAME.get(name)


__all__ = [
    "DEFAULT_TRANSCRIPTION_MODEL",
    "ModelMeta",
    "SONIOX_TRANSCRIPTION_MODELS",
    "STT_ASYNC_V3",
    "get_model_meta",
]
