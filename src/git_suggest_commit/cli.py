"""CLI interface for git-suggest-commit."""

from __future__ import annotations

import sys

import click
import httpx
from rich.console import Console
from rich.markup import escape

from . import __version__
from .assistant import SuggestCommitAssistant
from .config import DEFAULT_COUNT, DEFAULT_OLLAMA_URL, load_options
from .errors import SuggestCommitError
from .git import GitError
from .providers import PROVIDERS


console = Console()
err_console = Console(stderr=True)


@click.command()
@click.option(
    "--no-amend",
    is_flag=True,
    help="Don't amend after committing",
)
@click.option(
    "-p",
    "--prompt",
    help="A custom prompt to prefix the git diff with",
)
@click.option(
    "-m",
    "--model",
    help="AI model to use (default varies by provider)",
)
@click.option(
    "--provider",
    type=click.Choice(PROVIDERS),
    default="openai",
    help='AI provider to use: "openai", "deepseek", or "ollama"',
)
@click.option(
    "-k",
    "--api-key",
    help="API key (defaults to OPENAI_API_KEY or DEEPSEEK_API_KEY env var)",
)
@click.option(
    "-n",
    "--count",
    type=int,
    default=DEFAULT_COUNT,
    show_default=True,
    help="Number of commit messages to suggest",
)
@click.option(
    "--ollama-url",
    default=DEFAULT_OLLAMA_URL,
    help="Ollama server URL",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show provider details and full tracebacks on errors",
)
@click.version_option(__version__)
def main(
    no_amend: bool,
    prompt: str | None,
    model: str | None,
    provider: str,
    api_key: str | None,
    count: int,
    ollama_url: str,
    verbose: bool,
) -> None:
    """Suggest commit messages for staged changes and commit the one you pick.

    \b
    Examples:
      # Basic usage (uses OPENAI_API_KEY env var)
      git add -p && git-suggest-commit

      # Commit without opening the editor afterwards
      git-suggest-commit --no-amend

      # Use a different model and prompt
      git-suggest-commit -m gpt-4o-mini -p "Write a conventional commit message."

      # Use local Ollama
      git-suggest-commit --provider ollama --model llama3.2

    Use the arrow keys to move, Enter to commit and Escape to cancel.
    """
    try:
        options = load_options(
            provider=provider,
            api_key=api_key,
            model=model,
            prompt=prompt,
            count=count,
            amend=not no_amend,
            ollama_url=ollama_url,
            verbose=verbose,
        )
        assistant = SuggestCommitAssistant(options, console=console, err_console=err_console)
        status = assistant.run()

    except KeyboardInterrupt:
        sys.exit(130)
    except (SuggestCommitError, GitError, httpx.HTTPError, ConnectionError) as e:
        if verbose:
            err_console.print_exception()
        else:
            err_console.print(f"\n[red]❌ Error: {escape(str(e))}[/]", highlight=False)
        sys.exit(1)

    if status != 0:
        sys.exit(status)


if __name__ == "__main__":
    main()
