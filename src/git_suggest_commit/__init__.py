"""Suggest commit messages for staged git changes using OpenAI, DeepSeek, or Ollama."""

__version__ = "1.0.0"

from .assistant import SuggestCommitAssistant
from .config import SuggestOptions
from .selector import Cancelled, Selected, Selector

__all__ = [
    "SuggestCommitAssistant",
    "SuggestOptions",
    "Selector",
    "Selected",
    "Cancelled",
    "__version__",
]
