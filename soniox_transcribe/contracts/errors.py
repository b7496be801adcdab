from __future__ import annotations


class ComponentError(Exception):
    """Base exception for component-level failures."""


class ConfigurationError(ComponentError):
    """Raised when the adapter cannot be configured (e.g. missing API key)."""


class InvalidInputError(ComponentError, ValueError):
    """Raised when the audio input is of an unsupported type or malformed."""


class TranscriptionError(ComponentError):
    """Raised when the remote transcription workflow fails."""


class ProviderError(TranscriptionError):
    """Base for failures reported by (or read from) the provider API."""


class SonioxApiError(ProviderError):
    """Raised when the Soniox API answers with a non-success HTTP status."""

    def __init__(self, status: int, status_text: str, body: str | None = None) -> None:
        self.status = status
        self.status_text = status_text
        self.body = body
        message = f"Soniox API error ({status} {status_text})"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class ResponseParseError(ProviderError):
    """Raised when a provider response is not the JSON object we expect."""


class TranscriptionTimeoutError(TranscriptionError, TimeoutError):
    """Raised when job polling exceeds the configured timeout."""

    def __init__(self, message: str = "Transcription job polling timed out") -> None:
        super().__init__(message)


class JobFailureError(TranscriptionError):
    """Raised when the remote job reaches the error state."""

    def __init__(self, error_message: str | None = None) -> None:
        self.error_message = error_message or "Unknown error"
        super().__init__(f"Transcription failed: {self.error_message}")
