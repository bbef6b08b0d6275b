"""AI Provider implementations for commit message suggestions."""

import httpx

from ..errors import ConfigError
from .base import AIProvider, OpenAICompatibleProvider
from .deepseek import DeepSeekProvider
from .ollama import OllamaProvider
from .openai import OpenAIProvider

__all__ = [
    "AIProvider",
    "OpenAICompatibleProvider",
    "OpenAIProvider",
    "OllamaProvider",
    "DeepSeekProvider",
    "PROVIDERS",
    "API_KEY_ENV_VARS",
    "create_provider",
]

PROVIDERS = ("openai", "deepseek", "ollama")

# Providers that need an API key, and where the CLI looks for it
API_KEY_ENV_VARS = {
    "openai": OpenAIProvider.ENV_VAR_NAME,
    "deepseek": DeepSeekProvider.ENV_VAR_NAME,
}


def create_provider(
    provider: str = "openai",
    api_key: str | None = None,
    model: str | None = None,
    base_url: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> AIProvider:
    """Factory function to create an AI provider instance.

    Args:
        provider: Provider name - 'openai', 'ollama', or 'deepseek'
        api_key: API key for the provider (required for openai/deepseek)
        model: Model name to use (provider-specific defaults if not set)
        base_url: Base URL for the API (used for ollama, optional for others)
        transport: Custom httpx transport

    Returns:
        An AIProvider instance

    Raises:
        ConfigError: If provider is unknown or required config is missing
    """
    provider = provider.lower()

    if provider == "ollama":
        return OllamaProvider(model=model, base_url=base_url, transport=transport)
    elif provider == "deepseek":
        return DeepSeekProvider(
            api_key=api_key or "",
            model=model,
            base_url=base_url,
            transport=transport,
        )
    elif provider == "openai":
        return OpenAIProvider(
            api_key=api_key or "",
            model=model,
            base_url=base_url,
            transport=transport,
        )
    else:
        raise ConfigError(
            f"Unknown provider: {provider}. Supported providers: {', '.join(PROVIDERS)}"
        )
