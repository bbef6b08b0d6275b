"""DeepSeek API provider for commit message suggestions."""

from .base import OpenAICompatibleProvider


class DeepSeekProvider(OpenAICompatibleProvider):
    """DeepSeek API provider for commit message suggestions.

    DeepSeek API is OpenAI-compatible, but returns a single choice per
    request, so each candidate costs one call.
    Supports models: deepseek-chat, deepseek-coder, deepseek-reasoner
    """

    BASE_URL = "https://api.deepseek.com/"
    ENV_VAR_NAME = "DEEPSEEK_API_KEY"
    DEFAULT_MODEL = "deepseek-chat"
    PROVIDER_NAME = "DeepSeek"
    SUPPORTS_N = False
