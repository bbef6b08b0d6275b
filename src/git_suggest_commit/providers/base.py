"""Base protocol and types for AI providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..errors import ConfigError, ProviderError
from ..prompts import clean_message


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    _client: httpx.Client

    @abstractmethod
    def suggest_messages(
        self,
        prompt: str,
        system_prompt: str,
        count: int = 5,
    ) -> list[str]:
        """Generate candidate commit messages from a prompt.

        Args:
            prompt: The user prompt containing the diff
            system_prompt: The system prompt defining behavior
            count: How many candidates to ask for

        Returns:
            The generated messages in the order the provider returned them
        """
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Get the display name for this provider."""
        ...

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if hasattr(self, "_client"):
            self._client.close()

    def __enter__(self) -> AIProvider:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def collect_messages(contents: list[str], provider_name: str) -> list[str]:
    """Clean raw completions and drop the empty ones.

    Raises:
        ProviderError: If nothing usable is left
    """
    messages = [m for m in (clean_message(c) for c in contents) if m]
    if not messages:
        raise ProviderError(f"No commit message generated from {provider_name}")
    return messages


class OpenAICompatibleProvider(AIProvider):
    """Base class for OpenAI-compatible API providers.

    This base class handles the common logic for providers that use
    OpenAI-compatible chat completions API (OpenAI, DeepSeek, etc.).

    Subclasses only need to define:
        - BASE_URL: The API base URL
        - ENV_VAR_NAME: Environment variable the CLI reads the key from
        - DEFAULT_MODEL: Default model name
        - PROVIDER_NAME: Display name for the provider
        - SUPPORTS_N: Whether one request can return several choices
    """

    BASE_URL: str
    ENV_VAR_NAME: str
    DEFAULT_MODEL: str
    PROVIDER_NAME: str
    SUPPORTS_N: bool = True

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key for the service
            model: Model to use (defaults to DEFAULT_MODEL)
            base_url: Override for BASE_URL (e.g. a proxy)
            transport: Custom httpx transport

        Raises:
            ConfigError: If the API key is empty
        """
        if not api_key:
            raise ConfigError(f"{self.PROVIDER_NAME} API key is required.")
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self._client = httpx.Client(
            base_url=base_url or self.BASE_URL,
            headers={
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=60.0,
            transport=transport,
        )

    def _request_completions(
        self,
        prompt: str,
        system_prompt: str,
        n: int | None,
    ) -> list[str]:
        body: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        if n is not None:
            body["n"] = n

        response = self._client.post("chat/completions", json=body)
        response.raise_for_status()

        try:
            data = response.json()
            return [choice["message"]["content"] or "" for choice in data["choices"]]
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderError(
                f"Unexpected response from {self.PROVIDER_NAME}: {e}"
            ) from e

    def suggest_messages(
        self,
        prompt: str,
        system_prompt: str,
        count: int = 5,
    ) -> list[str]:
        """Generate candidate commit messages using the API.

        Args:
            prompt: The user prompt containing the diff
            system_prompt: The system prompt defining behavior
            count: How many candidates to ask for

        Returns:
            The generated messages, quotes and whitespace stripped

        Raises:
            httpx.HTTPError: If the API request fails
            ProviderError: If the response has no usable messages
        """
        if self.SUPPORTS_N:
            contents = self._request_completions(prompt, system_prompt, count)
        else:
            contents = []
            for _ in range(count):
                contents.extend(self._request_completions(prompt, system_prompt, None))

        return collect_messages(contents, self.PROVIDER_NAME)

    def get_name(self) -> str:
        """Get the display name for this provider."""
        return f"{self.PROVIDER_NAME} ({self.model})"

    def __del__(self) -> None:
        """Clean up HTTP client on deletion."""
        if hasattr(self, "_client"):
            self._client.close()
