"""Runtime options, resolved once at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError
from .providers import API_KEY_ENV_VARS, PROVIDERS

DEFAULT_COUNT = 5
DEFAULT_OLLAMA_URL = "http://localhost:11434"


@dataclass
class SuggestOptions:
    """Options for suggesting and committing a message."""

    provider: str = "openai"
    api_key: str | None = None
    model: str | None = None
    prompt: str | None = None
    count: int = DEFAULT_COUNT
    amend: bool = True
    ollama_url: str = DEFAULT_OLLAMA_URL
    verbose: bool = False


def resolve_api_key(
    provider: str,
    api_key: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Find the API key for a provider.

    Args:
        provider: Provider name
        api_key: Key given explicitly on the command line
        environ: Environment to read from (defaults to os.environ)

    Returns:
        The key, or None for providers that don't need one

    Raises:
        ConfigError: If the provider needs a key and none is set
    """
    env_var = API_KEY_ENV_VARS.get(provider)
    if env_var is None:
        return None
    if api_key:
        return api_key

    environ = os.environ if environ is None else environ
    key = environ.get(env_var)
    if not key:
        raise ConfigError(
            f"{env_var} not found. "
            f"Set the {env_var} environment variable or pass --api-key."
        )
    return key


def load_options(
    provider: str = "openai",
    api_key: str | None = None,
    model: str | None = None,
    prompt: str | None = None,
    count: int = DEFAULT_COUNT,
    amend: bool = True,
    ollama_url: str = DEFAULT_OLLAMA_URL,
    verbose: bool = False,
    environ: Mapping[str, str] | None = None,
) -> SuggestOptions:
    """Validate command line values and build SuggestOptions.

    Raises:
        ConfigError: If a value is invalid or a required API key is missing
    """
    provider = provider.lower()
    if provider not in PROVIDERS:
        raise ConfigError(
            f"Unknown provider: {provider}. Supported providers: {', '.join(PROVIDERS)}"
        )
    if count < 1:
        raise ConfigError(f"Number of suggestions must be at least 1, got {count}")

    return SuggestOptions(
        provider=provider,
        api_key=resolve_api_key(provider, api_key, environ),
        model=model,
        prompt=prompt,
        count=count,
        amend=amend,
        ollama_url=ollama_url,
        verbose=verbose,
    )
