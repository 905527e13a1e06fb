"""Line utilities: join, split, prefix and trim text lines."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with a newline between each pair (none after the last)."""
    return "\n".join(lines)


def split_lines(text: str) -> list[str]:
    """Split text on every `\\n`, dropping trailing empty lines.

    Empty text gives no lines at all, not a single empty line.
    Leading and inner empty lines are kept.
    Only LF separates lines, so a CRLF line keeps its trailing `\\r`.
    """
    if not text:
        return []
    parts = text.split("\n")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def prefix_lines(prefix: str, text: str) -> str:
    """Put *prefix* in front of every line of *text*.

    The prefixed lines are concatenated as-is: `prefix_lines(">", "a\\nb")`
    gives `">a>b"`. Empty text is returned unchanged.
    """
    if not text:
        return text
    return "".join(prefix + line for line in split_lines(text))


def trim_line(text: str) -> str:
    """Remove one trailing CRLF, CR or LF."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\r", "\n")):
        return text[:-1]
    return text


def read_lines(file_path: str | Path) -> list[str]:
    """Split a file from disk into lines, keeping any CR characters."""
    with open(Path(file_path), encoding="utf-8", newline="") as f:
        return split_lines(f.read())
