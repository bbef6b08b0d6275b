"""Ollama local provider for commit message suggestions."""

import httpx

from ..errors import ProviderError
from .base import AIProvider, collect_messages


class OllamaProvider(AIProvider):
    """Ollama local provider for commit message suggestions."""

    DEFAULT_MODEL = "llama3.2"
    DEFAULT_URL = "http://localhost:11434"

    def __init__(
        self,
        model: str | None = None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Ollama provider.

        Args:
            model: Model to use (default: llama3.2)
            base_url: Ollama server URL (default: http://localhost:11434)
            transport: Custom httpx transport
        """
        self.model = model or self.DEFAULT_MODEL
        self.base_url = (base_url or self.DEFAULT_URL).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=120.0,  # Ollama can be slow
            transport=transport,
        )

    def _connection_error(self) -> ConnectionError:
        return ConnectionError(
            f"Cannot connect to Ollama at {self.base_url}. "
            "Make sure Ollama is running (run 'ollama serve' in terminal)"
        )

    def _check_connection(self) -> None:
        """Check if Ollama is running and has the required model.

        Raises:
            ConnectionError: If cannot connect to Ollama
            ProviderError: If model is not available
        """
        try:
            response = self._client.get("/api/tags")
            response.raise_for_status()
        except httpx.ConnectError as e:
            raise self._connection_error() from e

        try:
            models = response.json().get("models") or []
            model_names = [m["name"].split(":")[0] for m in models]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise ProviderError(f"Unexpected response from Ollama: {e}") from e

        model_base = self.model.split(":")[0]
        if model_base not in model_names:
            available = ", ".join(model_names) if model_names else "none"
            raise ProviderError(
                f"Model '{self.model}' not found in Ollama. "
                f"Available models: {available}\n"
                f"To pull the model, run: ollama pull {self.model}"
            )

    def _chat(self, prompt: str, system_prompt: str) -> str:
        try:
            response = self._client.post(
                "/api/chat",
                json={
                    "model": self.model,
                    "messages": [
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": prompt},
                    ],
                    "stream": False,
                },
            )
            response.raise_for_status()
        except httpx.ConnectError as e:
            raise self._connection_error() from e

        try:
            data = response.json()
            return data["message"]["content"] or ""
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected response from Ollama: {e}") from e

    def suggest_messages(
        self,
        prompt: str,
        system_prompt: str,
        count: int = 5,
    ) -> list[str]:
        """Generate candidate commit messages using Ollama API.

        Ollama's chat endpoint returns one completion per call, so this
        issues ``count`` requests.

        Raises:
            ConnectionError: If cannot connect to Ollama
            ProviderError: If model not available or no message generated
            httpx.HTTPError: If the API request fails
        """
        self._check_connection()
        contents = [self._chat(prompt, system_prompt) for _ in range(count)]
        return collect_messages(contents, "Ollama")

    def get_name(self) -> str:
        """Get the display name for this provider."""
        return f"Ollama ({self.model})"

    def __del__(self) -> None:
        """Clean up HTTP client on deletion."""
        if hasattr(self, "_client"):
            self._client.close()
