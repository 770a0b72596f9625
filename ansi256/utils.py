"""ansi256 utility functions."""

from __future__ import annotations

import re
from pathlib import Path

import click

from .constants import ESCAPE_PATTERN
from .exceptions import UserError

_ESCAPE_RE = re.compile(ESCAPE_PATTERN)


def strip_escapes(text: str) -> str:
    """Remove every escape sequence (ESC up to and including the next 'm')."""
    return _ESCAPE_RE.sub("", text)


def display_length(text: str) -> int:
    """Return the number of columns text occupies once escapes are removed.

    Counts code points; wide and combining characters are not special-cased.
    """
    return len(strip_escapes(text))


def read_input_lines(path: str) -> list[str]:
    """Read lines of text from a file path, or from stdin when path is '-'.

    Args:
        path: File path, or "-" for standard input

    Returns:
        Lines with trailing newlines removed
    """
    if path == "-":
        stream = click.get_text_stream("stdin")
        return [line.rstrip("\r\n") for line in stream]

    p = Path(path)
    if not p.is_file():
        raise UserError(f"Input file not found: {path}")
    try:
        with p.open("r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise UserError(f"Cannot read {path}: {e}") from e
