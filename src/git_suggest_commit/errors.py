"""Exception types raised by git-suggest-commit."""


class SuggestCommitError(Exception):
    """Base class for errors reported by the command line tool."""

    pass


class ConfigError(SuggestCommitError):
    """Invalid or missing configuration (e.g. no API key)."""

    pass


class ProviderError(SuggestCommitError):
    """The AI provider returned no usable commit messages."""

    pass


class SelectorError(SuggestCommitError):
    """Interactive selection could not run to completion."""

    pass


class EmptyInputError(SelectorError, ValueError):
    """The selector was given nothing to choose from."""

    pass


class TerminalModeError(SelectorError):
    """The terminal could not be switched into or out of raw mode."""

    pass


class InputReadError(SelectorError):
    """The next key press could not be read from the terminal."""

    pass
