from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Sequence, TypeAlias

from dotenv import load_dotenv

from soniox_transcribe.adapters.soniox_transcription import (
    SonioxTranscriptionAdapter,
    SonioxTranscriptionConfig,
    soniox_transcription,
)
from soniox_transcribe.components.transcription import transcribe_audio
from soniox_transcribe.config import DEFAULT_POLLING_INTERVAL_MS, DEFAULT_SONIOX_BASE_URL, DEFAULT_TIMEOUT_MS
from soniox_transcribe.contracts.artifacts import AudioInput, TranscriptionRequest, TranscriptionResult
from soniox_transcribe.contracts.options import (
    OneWayTranslation,
    ProviderOptions,
    TranscriptionContext,
    TwoWayTranslation,
)
from soniox_transcribe.models import DEFAULT_TRANSCRIPTION_MODEL, get_model_meta


Argv: TypeAlias = Sequence[str]

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transcribe audio with the Soniox async API.")
    parser.add_argument("audio", help="Audio file path or http(s) URL.")
    parser.add_argument("--model", default=DEFAULT_TRANSCRIPTION_MODEL, help="Soniox transcription model.")
    parser.add_argument("--language", default=None, help="Expected language code (e.g. en).")
    parser.add_argument(
        "--language-hint",
        dest="language_hints",
        action="append",
        default=[],
        help="Language hint, in priority order (repeatable).",
    )
    parser.add_argument("--strict-hints", action="store_true", help="Rely more strongly on language hints.")
    parser.add_argument("--identify-language", action="store_true", help="Enable language identification.")
    parser.add_argument("--diarize", action="store_true", help="Enable speaker diarization.")
    parser.add_argument("--context", default=None, help="Free-text context to improve accuracy.")
    parser.add_argument("--term", dest="terms", action="append", default=[], help="Domain term (repeatable).")
    translation = parser.add_mutually_exclusive_group()
    translation.add_argument("--translate-to", default=None, help="One-way translation target language.")
    translation.add_argument(
        "--two-way",
        nargs=2,
        metavar=("LANGUAGE_A", "LANGUAGE_B"),
        default=None,
        help="Two-way translation between two languages.",
    )
    parser.add_argument("--client-reference-id", default=None, help="Client-defined reference id.")
    parser.add_argument("--base-url", default=DEFAULT_SONIOX_BASE_URL, help="Soniox API base URL.")
    parser.add_argument("--timeout-ms", type=_positive_int, default=DEFAULT_TIMEOUT_MS, help="Polling timeout.")
    parser.add_argument(
        "--poll-interval-ms",
        type=_nonnegative_int,
        default=DEFAULT_POLLING_INTERVAL_MS,
        help="Delay between status checks.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the JSON result to this path.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    return parser


def parse_args(argv: Argv | None = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)


def _build_context(args: argparse.Namespace) -> str | TranscriptionContext | None:
    if args.terms:
        return TranscriptionContext(text=args.context, terms=tuple(args.terms))
    return args.context


def build_provider_options(args: argparse.Namespace) -> ProviderOptions:
    translation: OneWayTranslation | TwoWayTranslation | None = None
    if args.translate_to:
        translation = OneWayTranslation(target_language=args.translate_to)
    elif args.two_way:
        translation = TwoWayTranslation(language_a=args.two_way[0], language_b=args.two_way[1])

    return ProviderOptions(
        language_hints=tuple(args.language_hints) or None,
        language_hints_strict=True if args.strict_hints else None,
        enable_language_identification=True if args.identify_language else None,
        enable_speaker_diarization=True if args.diarize else None,
        context=_build_context(args),
        client_reference_id=args.client_reference_id,
        translation=translation,
    )


def _audio_input(value: str) -> AudioInput:
    if value.startswith(("http://", "https://")):
        return value
    return Path(value)


def build_request(args: argparse.Namespace) -> TranscriptionRequest:
    return TranscriptionRequest(
        audio=_audio_input(args.audio),
        model=args.model,
        language=args.language,
        model_options=build_provider_options(args),
    )


def _build_adapter(args: argparse.Namespace) -> SonioxTranscriptionAdapter:
    if get_model_meta(args.model) is None:
        logger.warning("Model %s is not in the known Soniox model list", args.model)
    config = SonioxTranscriptionConfig(
        base_url=args.base_url,
        timeout_ms=int(args.timeout_ms),
        polling_interval_ms=int(args.poll_interval_ms),
    )
    return soniox_transcription(args.model, config=config)


def run_from_args(args: argparse.Namespace) -> TranscriptionResult:
    adapter = _build_adapter(args)
    request = build_request(args)
    return asyncio.run(transcribe_audio(request, adapter))


def result_to_json(result: TranscriptionResult) -> str:
    payload: dict[str, Any] = {key: value for key, value in asdict(result).items() if value is not None}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main(argv: Argv | None = None) -> int:
    args = parse_args(argv)
    load_dotenv()
    _configure_logging(args.log_level)
    try:
        result = run_from_args(args)
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    rendered = result_to_json(result)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered + "\n", encoding="utf-8")
        print(f"output={args.output}")
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
