"""Keyboard-driven selection of a commit message in the terminal."""

from __future__ import annotations

import os
import select
import sys
import termios
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import TextIO, Union

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from rich.console import Console
from rich.text import Text

from .errors import EmptyInputError, InputReadError, TerminalModeError

CUSTOM_MESSAGE_LABEL = "Enter a custom message..."

# How long to wait for the rest of an escape sequence before treating
# ESC as a key press of its own
ESCAPE_TIMEOUT = 0.1

# ANSI: cursor up one line, then erase that whole line
_ERASE_LINE = "\x1b[1A\x1b[2K"


class Key(Enum):
    """Key events the selector reacts to."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


_KEY_MAP = {
    Keys.Up: Key.UP,
    Keys.Down: Key.DOWN,
    Keys.ControlM: Key.ENTER,
    Keys.ControlJ: Key.ENTER,
    Keys.Escape: Key.ESCAPE,
}


@dataclass(frozen=True)
class Selected:
    """The user confirmed the candidate at ``index``."""

    index: int
    value: str


@dataclass(frozen=True)
class Cancelled:
    """The user pressed Escape."""


SelectionResult = Union[Selected, Cancelled]


@dataclass(frozen=True)
class UseCandidate:
    """Commit with a generated message."""

    message: str


@dataclass(frozen=True)
class EnterCustom:
    """Let git prompt for the message."""


Choice = Union[UseCandidate, EnterCustom]


def to_key(key_press: KeyPress) -> Key:
    """Map a parsed key press onto the keys the selector understands.

    Raises:
        KeyboardInterrupt: On Ctrl-C, since raw mode disables the signal
    """
    if key_press.key == Keys.ControlC:
        raise KeyboardInterrupt
    return _KEY_MAP.get(key_press.key, Key.OTHER)


class TerminalKeyReader:
    """Reads one key at a time from a terminal, in raw mode only while reading."""

    def __init__(self, stream: TextIO | None = None, input: Input | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._input = input
        self._pending: deque[KeyPress] = deque()

    def fileno(self) -> int:
        """Return the terminal's file descriptor.

        Raises:
            TerminalModeError: If the stream is not an interactive terminal
        """
        try:
            fd = self.stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalModeError("Standard input is not a terminal") from e
        if not os.isatty(fd):
            raise TerminalModeError(
                "Standard input is not an interactive terminal. "
                "Run this command from a terminal to pick a commit message."
            )
        return fd

    @property
    def input(self) -> Input:
        if self._input is None:
            self.fileno()
            self._input = create_input(self.stream)
        return self._input

    @contextmanager
    def raw_mode(self) -> Iterator[Input]:
        """Put the terminal into raw mode and restore the saved mode on exit."""
        inp = self.input
        mode = inp.raw_mode()
        try:
            mode.__enter__()
        except (termios.error, OSError) as e:
            raise TerminalModeError(f"Failed to enable raw mode: {e}") from e

        try:
            yield inp
        finally:
            try:
                mode.__exit__(None, None, None)
            except (termios.error, OSError) as e:
                raise TerminalModeError(f"Failed to restore terminal mode: {e}") from e

    @staticmethod
    def _wait(inp: Input, timeout: float | None) -> bool:
        try:
            ready, _, _ = select.select([inp.fileno()], [], [], timeout)
        except (OSError, ValueError) as e:
            raise InputReadError(f"Failed to wait for terminal input: {e}") from e
        return bool(ready)

    def _next_key_press(self, inp: Input) -> KeyPress:
        while not self._pending:
            self._wait(inp, None)
            self._pending.extend(inp.read_keys())
            if self._pending:
                break
            if inp.closed:
                self._pending.extend(inp.flush_keys())
                if not self._pending:
                    raise InputReadError("Input stream closed while waiting for a key press")
                break
            # Lone ESC stays buffered in the parser until flushed
            if not self._wait(inp, ESCAPE_TIMEOUT):
                self._pending.extend(inp.flush_keys())
        return self._pending.popleft()

    def __call__(self) -> Key:
        with self.raw_mode() as inp:
            key_press = self._next_key_press(inp)
        return to_key(key_press)


class Selector:
    """Arrow-key list selector.

    Each iteration renders the list, waits for a single key press and erases
    the list again, so the terminal is left as it was found whichever way the
    session ends.
    """

    def __init__(
        self,
        read_key: Callable[[], Key] | None = None,
        console: Console | None = None,
        title: str = "Select a commit message:",
    ) -> None:
        self.read_key = read_key if read_key is not None else TerminalKeyReader()
        self.console = console or Console(highlight=False)
        self.title = title

    def select(self, candidates: Sequence[str]) -> SelectionResult:
        """Let the user pick one of ``candidates``.

        Args:
            candidates: Lines to choose from, in display order

        Returns:
            ``Selected`` on Enter, ``Cancelled`` on Escape

        Raises:
            EmptyInputError: If ``candidates`` is empty
            TerminalModeError: If raw mode cannot be entered or left
            InputReadError: If reading a key fails
        """
        options = tuple(candidates)
        if not options:
            raise EmptyInputError("No candidates to select from")

        last = len(options) - 1
        cursor = 0

        while True:
            self._render(options, cursor)
            try:
                key = self.read_key()
            finally:
                self._erase(len(options) + 1)

            if key is Key.UP:
                cursor = max(cursor - 1, 0)
            elif key is Key.DOWN:
                cursor = min(cursor + 1, last)
            elif key is Key.ENTER:
                return Selected(cursor, options[cursor])
            elif key is Key.ESCAPE:
                return Cancelled()

    def _render(self, options: tuple[str, ...], cursor: int) -> None:
        # One terminal row per line, or _erase would leave wrapped rows behind
        self._print_row(Text(self.title))
        for i, option in enumerate(options):
            if i == cursor:
                line = Text.assemble((">", "bold green"), " ", option)
            else:
                line = Text(f"  {option}")
            self._print_row(line)

    def _print_row(self, line: Text) -> None:
        self.console.print(line, no_wrap=True, overflow="ellipsis", crop=True)

    def _erase(self, lines: int) -> None:
        self.console.file.write(_ERASE_LINE * lines)
        self.console.file.flush()


def choose_message(messages: Sequence[str], selector: Selector) -> Choice | None:
    """Offer the generated messages plus a custom-message entry.

    Args:
        messages: Generated commit messages
        selector: Selector to run

    Returns:
        The user's choice, or None if they cancelled
    """
    result = selector.select([CUSTOM_MESSAGE_LABEL, *messages])
    if isinstance(result, Cancelled):
        return None
    if result.index == 0:
        return EnterCustom()
    return UseCandidate(messages[result.index - 1])
