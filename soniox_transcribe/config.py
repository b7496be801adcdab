from __future__ import annotations

import os
from typing import Callable, Mapping, TypeAlias

from soniox_transcribe.contracts.errors import ConfigurationError


DEFAULT_SONIOX_BASE_URL = "https://api.soniox.com"
SONIOX_API_KEY_ENV_VAR = "SONIOX_API_KEY"
DEFAULT_TIMEOUT_MS = 180_000
DEFAULT_POLLING_INTERVAL_MS = 1_000

CredentialProvider: TypeAlias = Callable[[], str]


def get_soniox_api_key_from_env(*, env: Mapping[str, str] | None = None) -> str:
    effective_env: Mapping[str, str] = os.environ if env is None else env

    key = effective_env.get(SONIOX_API_KEY_ENV_VAR)
    if not key:
        raise ConfigurationError(
            f"{SONIOX_API_KEY_ENV_VAR} is required. Set it in your environment "
            "or pass an explicit api_key."
        )
    return key


__all__ = [
    "CredentialProvider",
    "DEFAULT_POLLING_INTERVAL_MS",
    "DEFAULT_SONIOX_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "SONIOX_API_KEY_ENV_VAR",
    "get_soniox_api_key_from_env",
]
