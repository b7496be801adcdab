from __future__ import annotations

from typing import Any, Mapping

from soniox_transcribe.contracts.options import (
    OneWayTranslation,
    ProviderOptions,
    TranscriptionContext,
    Translation,
)


# Flat fields copied as-is when set.
_PASSTHROUGH_FIELDS = (
    "language_hints_strict",
    "enable_language_identification",
    "enable_speaker_diarization",
    "client_reference_id",
    "webhook_url",
    "webhook_auth_header_name",
    "webhook_auth_header_value",
)


def coerce_provider_options(options: ProviderOptions | Mapping[str, Any] | None) -> ProviderOptions:
    if options is None:
        return ProviderOptions()
    if isinstance(options, ProviderOptions):
        return options
    return ProviderOptions.from_mapping(options)


def merge_language_hints(hints: tuple[str, ...] | list[str] | None, language: str | None) -> list[str]:
    """Request-level language goes last so explicit hints keep priority."""
    merged = list(hints) if hints else []
    if language and language not in merged:
        merged.append(language)
    return merged


def map_context(context: str | TranscriptionContext | None) -> str | dict[str, Any] | None:
    if not context:
        return None
    if isinstance(context, str):
        return context

    mapped: dict[str, Any] = {}
    if context.general is not None:
        mapped["general"] = [{"key": entry.key, "value": entry.value} for entry in context.general]
    if context.text is not None:
        mapped["text"] = context.text
    if context.terms is not None:
        mapped["terms"] = list(context.terms)
    if context.translation_terms is not None:
        mapped["translation_terms"] = [
            {"source": term.source, "target": term.target} for term in context.translation_terms
        ]
    return mapped


def map_translation(translation: Translation | None) -> dict[str, str] | None:
    if translation is None:
        return None
    if isinstance(translation, OneWayTranslation):
        return {"type": "one_way", "target_language": translation.target_language}
    return {
        "type": "two_way",
        "language_a": translation.language_a,
        "language_b": translation.language_b,
    }


def map_provider_options(
    options: ProviderOptions | Mapping[str, Any] | None,
    language: str | None,
) -> dict[str, Any]:
    """
    Translate caller options into the job-creation wire parameters.
    Unset fields are omitted from the result; the input is never mutated.
    """
    opts = coerce_provider_options(options)
    params: dict[str, Any] = {}

    hints = merge_language_hints(opts.language_hints, language)
    if hints:
        params["language_hints"] = hints

    for name in _PASSTHROUGH_FIELDS:
        value = getattr(opts, name)
        if value is not None:
            params[name] = value

    context = map_context(opts.context)
    if context is not None:
        params["context"] = context

    translation = map_translation(opts.translation)
    if translation is not None:
        params["translation"] = translation

    return params


__all__ = [
    "coerce_provider_options",
    "map_context",
    "map_provider_options",
    "map_translation",
    "merge_language_hints",
]
