"""Suggest commit messages for staged changes and commit the chosen one."""

from __future__ import annotations

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import SuggestOptions
from .git import GitRepo
from .prompts import SYSTEM_PROMPT, build_prompt
from .providers import AIProvider, create_provider
from .selector import EnterCustom, Selector, choose_message

NOTHING_TO_COMMIT = 'no changes added to commit (use "git add" and/or "git commit -a")'


class SuggestCommitAssistant:
    """Runs one suggest-select-commit session."""

    def __init__(
        self,
        options: SuggestOptions | None = None,
        repo: GitRepo | None = None,
        provider: AIProvider | None = None,
        selector: Selector | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        """Initialize the assistant.

        Args:
            options: Resolved options
            repo: Repository to commit to (defaults to cwd)
            provider: AI provider (created from options on first use)
            selector: Interactive selector
            console: Console for progress output
            err_console: Console for notices and errors
        """
        self.options = options or SuggestOptions()
        self.repo = repo or GitRepo()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.selector = selector or Selector(console=self.console)
        self._provider = provider

    def _get_provider(self) -> AIProvider:
        """Lazily create and return the AI provider."""
        if self._provider is None:
            self._provider = create_provider(
                provider=self.options.provider,
                api_key=self.options.api_key,
                model=self.options.model,
                base_url=self.options.ollama_url if self.options.provider == "ollama" else None,
            )
        return self._provider

    def suggest(self, diff: str) -> list[str]:
        """Ask the provider for candidate messages, with a spinner."""
        provider = self._get_provider()
        if self.options.verbose:
            self.console.print(f"[dim]Using {provider.get_name()}[/]")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task("Fetching suggested commit messages...", total=None)
            return provider.suggest_messages(
                build_prompt(diff, self.options.prompt),
                SYSTEM_PROMPT,
                self.options.count,
            )

    def run(self) -> int:
        """Suggest, select and commit.

        Returns:
            Exit status for the process

        Raises:
            GitError: If reading the staged diff fails
            ProviderError: If no messages could be generated
            SelectorError: If the terminal cannot be used interactively
        """
        self.repo.check_repository()

        diff = self.repo.get_staged_diff()
        if not diff.strip():
            self.err_console.print(NOTHING_TO_COMMIT, markup=False, highlight=False)
            return 0

        messages = self.suggest(diff)

        choice = choose_message(messages, self.selector)
        if choice is None:
            return 0

        if isinstance(choice, EnterCustom):
            return self.repo.commit(None)

        status = self.repo.commit(choice.message)
        if status == 0 and self.options.amend:
            return self.repo.amend()
        return status


__all__ = ["SuggestCommitAssistant", "NOTHING_TO_COMMIT"]
