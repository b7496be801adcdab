from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from typing import Any, AsyncIterator, Awaitable, Callable, Mapping, TypeAlias

import httpx

from soniox_transcribe.adapters.transcription import TranscriptionProvider
from soniox_transcribe.components.audio import extract_audio_url, prepare_audio_file
from soniox_transcribe.components.normalize import normalize_transcript, parse_tokens
from soniox_transcribe.components.options import map_provider_options
from soniox_transcribe.config import (
    DEFAULT_POLLING_INTERVAL_MS,
    DEFAULT_SONIOX_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    CredentialProvider,
    get_soniox_api_key_from_env,
)
from soniox_transcribe.contracts.artifacts import AudioFile, TranscriptionRequest, TranscriptionResult
from soniox_transcribe.contracts.errors import (
    JobFailureError,
    ResponseParseError,
    SonioxApiError,
    TranscriptionTimeoutError,
)
from soniox_transcribe.utils.ids import generate_id
from soniox_transcribe.utils.time import Clock, Timer, now_monotonic_s

logger = logging.getLogger(__name__)

Sleep: TypeAlias = Callable[[float], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class SonioxTranscriptionConfig:
    api_key: str | None = None
    base_url: str = DEFAULT_SONIOX_BASE_URL
    headers: Mapping[str, str] | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    polling_interval_ms: int = DEFAULT_POLLING_INTERVAL_MS
    request_timeout_s: float = 60.0


def _safe_read_text(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return ""


def _require_id(payload: Mapping[str, Any], what: str) -> str:
    value = payload.get("id")
    if not isinstance(value, str) or not value:
        raise ResponseParseError(f"Soniox {what} response is missing 'id'")
    return value


class SonioxTranscriptionAdapter(TranscriptionProvider):
    """
    Soniox async transcription adapter.

    One ``transcribe`` call uploads the audio (unless it is already a URL), creates a
    transcription job, polls it to a terminal state, fetches the transcript and
    normalizes it. The job and the uploaded file are always deleted afterwards.
    """

    name = "soniox"

    def __init__(
        self,
        config: SonioxTranscriptionConfig,
        model: str,
        *,
        client: httpx.AsyncClient | None = None,
        credential_provider: CredentialProvider = get_soniox_api_key_from_env,
        clock: Clock = now_monotonic_s,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if not model:
            raise ValueError("model is required")
        if config.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")
        if config.polling_interval_ms < 0:
            raise ValueError("polling_interval_ms must be >= 0")

        api_key = config.api_key or credential_provider()
        headers = httpx.Headers({"authorization": f"Bearer {api_key}"})
        headers.update(config.headers or {})

        self.model = model
        self._config = config
        self._headers = headers
        self._client = client
        self._clock = clock
        self._sleep = sleep

    @property
    def config(self) -> SonioxTranscriptionConfig:
        return self._config

    async def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        model = request.model or self.model
        audio_url = extract_audio_url(request.audio)
        upload = None if audio_url else prepare_audio_file(request.audio)
        params = map_provider_options(request.model_options, request.language)

        file_id: str | None = None
        transcription_id: str | None = None

        async with self._client_scope() as client:
            try:
                if upload is not None:
                    file_id = await self._upload_file(client, upload)

                source = {"audio_url": audio_url} if audio_url else {"file_id": file_id}
                transcription_id = await self._create_transcription(client, {"model": model, **source, **params})

                status = await self._poll_for_completion(client, transcription_id)
                transcript = await self._request_json(
                    client, "GET", f"/v1/transcriptions/{transcription_id}/transcript"
                )

                raw_tokens = transcript.get("tokens") or []
                normalized = normalize_transcript(parse_tokens(raw_tokens), status, request.language)
                result = TranscriptionResult(
                    id=generate_id(self.name),
                    model=model,
                    text=transcript.get("text") or "",
                    language=normalized.language,
                    duration=normalized.duration,
                    segments=normalized.segments,
                    provider_metadata={"soniox": {"tokens": raw_tokens}} if raw_tokens else None,
                )
            finally:
                if transcription_id:
                    await self._try_delete(client, f"/v1/transcriptions/{transcription_id}")
                if file_id:
                    await self._try_delete(client, f"/v1/files/{file_id}")

        logger.info(
            "Soniox transcription %s completed: model=%s duration=%s segments=%d",
            transcription_id,
            model,
            result.duration,
            len(result.segments or []),
        )
        return result

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._config.request_timeout_s) as client:
            yield client

    def _url(self, path: str) -> httpx.URL:
        return httpx.URL(self._config.base_url).join(path)

    async def _upload_file(self, client: httpx.AsyncClient, upload: AudioFile) -> str:
        payload = await self._request_json(
            client,
            "POST",
            "/v1/files",
            files={"file": (upload.filename, upload.content, upload.media_type)},
        )
        file_id = _require_id(payload, "file upload")
        logger.debug("Uploaded %s (%d bytes) as file %s", upload.filename, len(upload.content), file_id)
        return file_id

    async def _create_transcription(self, client: httpx.AsyncClient, body: dict[str, Any]) -> str:
        payload = await self._request_json(
            client,
            "POST",
            "/v1/transcriptions",
            json=body,
            headers={"content-type": "application/json"},
        )
        transcription_id = _require_id(payload, "create transcription")
        logger.info("Created Soniox transcription %s (model=%s)", transcription_id, body.get("model"))
        return transcription_id

    async def _poll_for_completion(self, client: httpx.AsyncClient, transcription_id: str) -> dict[str, Any]:
        timer = Timer.start(self._clock)
        interval_s = self._config.polling_interval_ms / 1000

        while True:
            if timer.elapsed_ms() > self._config.timeout_ms:
                raise TranscriptionTimeoutError()

            status = await self._request_json(client, "GET", f"/v1/transcriptions/{transcription_id}")
            state = status.get("status")
            logger.debug("Soniox transcription %s status=%s", transcription_id, state)

            if state == "completed":
                return status
            if state == "error":
                raise JobFailureError(status.get("error_message"))

            await self._sleep(interval_s)

    async def _request_json(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        request_headers = httpx.Headers(self._headers)
        request_headers.update(headers or {})

        response = await client.request(method, self._url(path), headers=request_headers, **kwargs)
        text = _safe_read_text(response)
        if not response.is_success:
            raise SonioxApiError(response.status_code, response.reason_phrase, text)
        if not text:
            return {}

        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise ResponseParseError("Failed to parse Soniox response JSON") from exc
        if not isinstance(payload, dict):
            raise ResponseParseError("Soniox response JSON must be an object")
        return payload

    async def _try_delete(self, client: httpx.AsyncClient, path: str) -> None:
        try:
            await client.request("DELETE", self._url(path), headers=self._headers)
        except Exception as exc:
            logger.warning("Failed to delete Soniox resource %s: %s", path, exc)


def create_soniox_transcription(
    model: str,
    api_key: str,
    *,
    config: SonioxTranscriptionConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> SonioxTranscriptionAdapter:
    """Create a Soniox transcription adapter with an explicit API key."""
    effective = replace(config or SonioxTranscriptionConfig(), api_key=api_key)
    return SonioxTranscriptionAdapter(effective, model, client=client)


def soniox_transcription(
    model: str,
    *,
    config: SonioxTranscriptionConfig | None = None,
    client: httpx.AsyncClient | None = None,
    env: Mapping[str, str] | None = None,
) -> SonioxTranscriptionAdapter:
    """Create a Soniox transcription adapter with the API key read from SONIOX_API_KEY."""
    api_key = get_soniox_api_key_from_env(env=env)
    return create_soniox_transcription(model, api_key, config=config, client=client)


__all__ = [
    "SonioxTranscriptionAdapter",
    "SonioxTranscriptionConfig",
    "create_soniox_transcription",
    "soniox_transcription",
]
