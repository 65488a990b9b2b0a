"""Console input with validation, and the event log."""

from __future__ import annotations

import os
import sys
import time
from typing import TextIO


def sanitize_input(text: str) -> str:
    """Keep only ASCII letters, digits, underscores and hyphens."""
    return "".join(
        char
        for char in text
        if (char.isascii() and char.isalnum()) or char in "_-"
    )


class Console:
    """Prompts the user, validates single-word answers and logs events."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        log_path: str | os.PathLike[str] = "log.txt",
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.log_path = log_path

    def write(self, text: str) -> None:
        """Write ``text`` to the output stream."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return one line without its newline.

        Raises EOFError when the input is exhausted.
        """
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line[:-1] if line.endswith("\n") else line

    def read_input(self, prompt: str, max_length: int) -> str:
        """Ask until the user enters a non-empty answer of at most ``max_length`` characters.

        The raw line is checked against the limit first; the answer returned
        is the line with every character other than letters, digits, ``_``
        and ``-`` removed.
        """
        while True:
            line = self.read_line(prompt)
            if len(line) > max_length:
                self.log("Error: Input exceeds maximum length")
                self.write(
                    f"Error: La entrada excede el limite de {max_length} "
                    "caracteres. Intente de nuevo.\n"
                )
                continue
            sanitized = sanitize_input(line)
            if not sanitized:
                self.log("Error: Information not entered")
                self.write("Error: No ha digitado.\n")
                continue
            return sanitized

    def log(self, event: str) -> None:
        """Append ``event`` with a timestamp to the log file."""
        try:
            with open(self.log_path, "a", encoding="utf-8") as log_file:
                log_file.write(f"[{time.ctime()}] {event}\n")
        except OSError:
            print("Error al abrir archivo", file=sys.stderr)