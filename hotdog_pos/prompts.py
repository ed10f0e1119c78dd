"""Operator input helpers with local retry."""

from __future__ import annotations

import logging
import re
from collections import deque
from typing import TextIO

from rich.console import Console

logger = logging.getLogger(__name__)

INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a whole number."
NEGATIVE_NUMBER_MESSAGE = "Input must be a non-negative number."

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def read_line(console: Console, prompt: str, stream: TextIO) -> str:
    """Prompt and read one line, stripped. Raises EOFError once input is exhausted."""
    raw = console.input(prompt, markup=False, emoji=False, stream=stream)
    if not raw:
        raise EOFError("standard input closed")
    return raw.strip()


def parse_int(raw: str) -> int | None:
    """Parse a signed base-10 integer, or None when the text is not one."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    return int(raw)


class OperatorInput:
    """
    Whitespace-separated token reader over the operator's input stream.

    Tokens left over on a line are kept for the next prompt. A malformed
    token throws away the rest of its line.
    """

    def __init__(self, console: Console, stream: TextIO) -> None:
        self.console = console
        self.stream = stream
        self._pending: deque[str] = deque()

    def _next_token(self, prompt: str, *, blank_is_empty: bool) -> str | None:
        if self._pending:
            self.console.print(prompt, markup=False, emoji=False, end="")
            return self._pending.popleft()

        line = read_line(self.console, prompt, self.stream)
        # Numeric prompts wait on blank lines without re-prompting.
        while not line and not blank_is_empty:
            line = read_line(self.console, "", self.stream)
        if not line:
            return None

        self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()

    def read_non_negative_int(self, prompt: str) -> int:
        """Prompt until the operator enters an integer >= 0."""
        while True:
            raw = self._next_token(prompt, blank_is_empty=False)
            value = parse_int(raw)
            if value is None:
                logger.debug("rejected non-numeric input %r", raw)
                self.console.print(INVALID_NUMBER_MESSAGE, style="red", markup=False)
                self.discard_line()
                continue
            if value < 0:
                logger.debug("rejected negative input %d", value)
                self.console.print(NEGATIVE_NUMBER_MESSAGE, style="red", markup=False)
                continue
            return value

    def read_command(self, prompt: str) -> str | None:
        """Read a single-character command, upper-cased. None for anything else."""
        raw = self._next_token(prompt, blank_is_empty=True)
        if raw is None:
            return None
        if len(raw) != 1:
            self.discard_line()
            return None
        return raw.upper()
