"""Whitespace-token console input and plain text output for the menus."""

from __future__ import annotations

import sys
from typing import TextIO


class InputExhausted(EOFError):
    """Raised when input ends while a value is still expected."""


class Console:
    """Reads whitespace-separated values and whole lines from a text stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._stdout.write(text)
        self._stdout.flush()

    def _next_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise InputExhausted("input ended")
        return line

    def read_token(self) -> str:
        """The next whitespace-delimited word, reading further lines as needed."""
        while not self._pending.strip():
            self._pending = self._next_line()
        text = self._pending.lstrip()
        parts = text.split(maxsplit=1)
        token = parts[0]
        self._pending = text[len(token):]
        return token

    def read_int(self) -> int:
        """The next word as an integer; ValueError if it is not one."""
        token = self.read_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a whole number, got {token!r}") from None

    def read_float(self) -> float:
        """The next word as a number; ValueError if it is not one."""
        token = self.read_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def read_line(self) -> str:
        """A line of text.

        If words have been read from the current line and text remains on it,
        that remainder (less one separating character) is returned; otherwise
        the next line is read.
        """
        if self._pending.strip():
            line = self._pending[1:]
        else:
            line = self._next_line()
        self._pending = ""
        return line.rstrip("\r\n")