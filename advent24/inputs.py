"""Reading puzzle input files."""

from __future__ import annotations

import os


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings.

    Lines end at ``\\n``; a ``\\r`` just before it is dropped too.  A final
    line ending does not start an extra empty line.  A missing or
    unreadable file raises ``OSError``.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]