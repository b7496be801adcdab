from .artifacts import (
    AudioFile,
    AudioInput,
    TranscriptionRequest,
    TranscriptionResult,
    TranscriptSegment,
    TranscriptToken,
)
from .errors import (
    ComponentError,
    ConfigurationError,
    InvalidInputError,
    JobFailureError,
    ProviderError,
    ResponseParseError,
    SonioxApiError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from .options import (
    ContextEntry,
    OneWayTranslation,
    ProviderOptions,
    TranscriptionContext,
    Translation,
    TranslationTerm,
    TwoWayTranslation,
)

__all__ = [
    "AudioFile",
    "AudioInput",
    "TranscriptionRequest",
    "TranscriptionResult",
    "TranscriptSegment",
    "TranscriptToken",
    "ContextEntry",
    "OneWayTranslation",
    "ProviderOptions",
    "TranscriptionContext",
    "Translation",
    "TranslationTerm",
    "TwoWayTranslation",
    "ComponentError",
    "ConfigurationError",
    "InvalidInputError",
    "TranscriptionError",
    "ProviderError",
    "SonioxApiError",
    "ResponseParseError",
    "TranscriptionTimeoutError",
    "JobFailureError",
]
