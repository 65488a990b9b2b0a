"""Single-character XOR cipher used for the user database."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_KEY = "N"


def xor_cipher(text: str, key: str = DEFAULT_KEY) -> str:
    """XOR every character of ``text`` with ``key``.

    Applying the cipher twice with the same key returns the original text.
    """
    if len(key) != 1:
        raise ValueError("the key must be a single character")
    mask = ord(key)
    return "".join(chr(ord(char) ^ mask) for char in text)


def encrypt_file(
    source: str | os.PathLike[str],
    target: str | os.PathLike[str],
) -> None:
    """Encrypt a plain-text user list line by line into ``target``.

    Carriage returns are dropped from every line and each encrypted line is
    written followed by a single newline.  ``target`` is overwritten.
    """
    text = Path(source).read_bytes().decode("latin-1")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    encrypted = "".join(xor_cipher(line.replace("\r", "")) + "\n" for line in lines)
    Path(target).write_bytes(encrypted.encode("latin-1"))