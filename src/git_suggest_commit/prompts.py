"""Prompt templates for commit message suggestions."""

# System prompt for the AI
SYSTEM_PROMPT = "You are a helpful assistant."

DEFAULT_PROMPT = (
    "Given the following git diff, suggest a commit message that can be passed to `git commit`."
)

FORMAT_INSTRUCTIONS = (
    "Return only a single line of text no more than 50 characters. "
    "Do not include an explanation."
)


def build_prompt(diff: str, prompt: str | None = None) -> str:
    """Build the user prompt for commit message generation.

    Args:
        diff: The staged git diff
        prompt: Optional custom instruction placed before the diff

    Returns:
        The complete prompt string
    """
    instruction = prompt or DEFAULT_PROMPT
    return f"{instruction}\n{FORMAT_INSTRUCTIONS}\n\n```\n{diff}\n```"


def clean_message(text: str) -> str:
    """Trim whitespace and one pair of surrounding double quotes."""
    message = text.strip()
    if len(message) > 1 and message.startswith('"') and message.endswith('"'):
        message = message[1:-1]
    return message
