"""OpenAI API provider for commit message suggestions."""

from .base import OpenAICompatibleProvider


class OpenAIProvider(OpenAICompatibleProvider):
    """OpenAI API provider for commit message suggestions."""

    BASE_URL = "https://api.openai.com/v1/"
    ENV_VAR_NAME = "OPENAI_API_KEY"
    DEFAULT_MODEL = "gpt-3.5-turbo"
    PROVIDER_NAME = "OpenAI"
