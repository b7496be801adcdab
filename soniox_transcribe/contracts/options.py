from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, TypeAlias

from .errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class ContextEntry:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class TranslationTerm:
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class TranscriptionContext:
    """Structured context that helps the model with domain vocabulary."""

    general: tuple[ContextEntry, ...] | None = None
    text: str | None = None
    terms: tuple[str, ...] | None = None
    translation_terms: tuple[TranslationTerm, ...] | None = None


@dataclass(frozen=True, slots=True)
class OneWayTranslation:
    target_language: str
    type: Literal["one_way"] = "one_way"


@dataclass(frozen=True, slots=True)
class TwoWayTranslation:
    language_a: str
    language_b: str
    type: Literal["two_way"] = "two_way"


Translation: TypeAlias = OneWayTranslation | TwoWayTranslation


@dataclass(frozen=True, slots=True)
class ProviderOptions:
    """Soniox-specific options carried on a transcription request."""

    language_hints: tuple[str, ...] | None = None
    language_hints_strict: bool | None = None
    enable_language_identification: bool | None = None
    enable_speaker_diarization: bool | None = None
    context: str | TranscriptionContext | None = None
    client_reference_id: str | None = None
    webhook_url: str | None = None
    webhook_auth_header_name: str | None = None
    webhook_auth_header_value: str | None = None
    translation: Translation | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProviderOptions":
        """
        Build options from a plain mapping.
        Keys may be camelCase (``languageHints``) or snake_case (``language_hints``).
        """
        hints = _pick(data, "language_hints", "languageHints")
        return cls(
            language_hints=tuple(hints) if hints is not None else None,
            language_hints_strict=_pick(data, "language_hints_strict", "languageHintsStrict"),
            enable_language_identification=_pick(
                data, "enable_language_identification", "enableLanguageIdentification"
            ),
            enable_speaker_diarization=_pick(data, "enable_speaker_diarization", "enableSpeakerDiarization"),
            context=_parse_context(_pick(data, "context")),
            client_reference_id=_pick(data, "client_reference_id", "clientReferenceId"),
            webhook_url=_pick(data, "webhook_url", "webhookUrl"),
            webhook_auth_header_name=_pick(data, "webhook_auth_header_name", "webhookAuthHeaderName"),
            webhook_auth_header_value=_pick(data, "webhook_auth_header_value", "webhookAuthHeaderValue"),
            translation=_parse_translation(_pick(data, "translation")),
        )


def _pick(data: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in data:
            return data[name]
    return None


def _parse_context(raw: Any) -> str | TranscriptionContext | None:
    if raw is None or isinstance(raw, (str, TranscriptionContext)):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError("context must be a string or a mapping")

    general = _pick(raw, "general")
    terms = _pick(raw, "terms")
    translation_terms = _pick(raw, "translation_terms", "translationTerms")
    try:
        return TranscriptionContext(
            general=tuple(_context_entry(item) for item in general) if general is not None else None,
            text=_pick(raw, "text"),
            terms=tuple(terms) if terms is not None else None,
            translation_terms=(
                tuple(_translation_term(item) for item in translation_terms)
                if translation_terms is not None
                else None
            ),
        )
    except (KeyError, TypeError) as exc:
        raise InvalidInputError(f"invalid context: {exc}") from exc


def _context_entry(item: Any) -> ContextEntry:
    if isinstance(item, ContextEntry):
        return item
    return ContextEntry(key=item["key"], value=item["value"])


def _translation_term(item: Any) -> TranslationTerm:
    if isinstance(item, TranslationTerm):
        return item
    return TranslationTerm(source=item["source"], target=item["target"])


def _parse_translation(raw: Any) -> Translation | None:
    if raw is None or isinstance(raw, (OneWayTranslation, TwoWayTranslation)):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError("translation must be a mapping")

    kind = raw.get("type")
    if kind == "one_way":
        target = _pick(raw, "target_language", "targetLanguage")
        if not target:
            raise InvalidInputError("one_way translation requires a target language")
        return OneWayTranslation(target_language=target)
    if kind == "two_way":
        language_a = _pick(raw, "language_a", "languageA")
        language_b = _pick(raw, "language_b", "languageB")
        if not language_a or not language_b:
            raise InvalidInputError("two_way translation requires language_a and language_b")
        return TwoWayTranslation(language_a=language_a, language_b=language_b)
    raise InvalidInputError(f"unknown translation type: {kind!r}")


__all__ = [
    "ContextEntry",
    "OneWayTranslation",
    "ProviderOptions",
    "TranscriptionContext",
    "Translation",
    "TranslationTerm",
    "TwoWayTranslation",
]
