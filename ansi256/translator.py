"""Shorthand color directive translation.

A directive opens with two literal brackets and names palette indexes:

    [[ or [[m        reset everything
    [[;N or [[;Nm    background N
    [[F;B or [[F;Bm  foreground F, then background B
    [[N or [[Nm      foreground N

The trailing "m" is only needed when literal digits follow the directive,
e.g. "[[20m5" is color 20 followed by "5" while "[[205" is color 205.
Directives that don't fit one of these shapes, or whose numbers fall outside
0-255, are dropped from the output.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .constants import (
    BG_TEMPLATE,
    DIRECTIVE_PATTERN,
    FG_TEMPLATE,
    MAX_INDEX,
    RESET,
)
from .utils import display_length

logger = logging.getLogger(__name__)

_DIRECTIVE_RE = re.compile(DIRECTIVE_PATTERN)

# Order matters: the combined shape is checked before the single-number ones.
_RESET_RE = re.compile(r"\[\[m?")
_BACKGROUND_RE = re.compile(r"\[\[;(\d{1,3})m?")
_COMBINED_RE = re.compile(r"\[\[(\d{1,3});(\d{1,3})m?")
_FOREGROUND_RE = re.compile(r"\[\[(\d{1,3})m?")


class DirectiveKind(Enum):
    """Shape of a shorthand directive."""

    RESET = "reset"
    BACKGROUND = "background"
    COMBINED = "combined"
    FOREGROUND = "foreground"
    INVALID = "invalid"


@dataclass(frozen=True)
class Directive:
    """A classified shorthand directive."""

    kind: DirectiveKind
    foreground: int | None = None
    background: int | None = None

    def expansion(self) -> str:
        """Return the escape sequence(s) this directive stands for."""
        if self.kind is DirectiveKind.RESET:
            return RESET
        if self.kind is DirectiveKind.BACKGROUND:
            return bg(self.background)
        if self.kind is DirectiveKind.COMBINED:
            return fg(self.foreground) + bg(self.background)
        if self.kind is DirectiveKind.FOREGROUND:
            return fg(self.foreground)
        return ""


INVALID = Directive(DirectiveKind.INVALID)


@dataclass(frozen=True)
class FormattedText:
    """Expanded text plus the number of columns it occupies.

    display_length is computed once, by from_content() or translate(), and
    is not kept in sync with anything else. Build a new value instead of
    reusing a stale length.

    str() and f-strings show only the content.
    """

    content: str
    display_length: int

    @classmethod
    def from_content(cls, content: str) -> FormattedText:
        """Wrap already-expanded content, measuring its display length."""
        return cls(content=content, display_length=display_length(content))

    def __str__(self) -> str:
        return self.content

    def __format__(self, format_spec: str) -> str:
        return format(self.content, format_spec)

    def ljust(self, width: int, fillchar: str = " ") -> str:
        """Left-justify by display length rather than raw length."""
        return self.content + fillchar * max(0, width - self.display_length)

    def rjust(self, width: int, fillchar: str = " ") -> str:
        """Right-justify by display length rather than raw length."""
        return fillchar * max(0, width - self.display_length) + self.content


def _check_index(index: int) -> int:
    if not 0 <= index <= MAX_INDEX:
        raise ValueError(f"palette index out of range 0-{MAX_INDEX}: {index}")
    return index


def fg(index: int) -> str:
    """Return the escape sequence setting the foreground to a palette index."""
    return FG_TEMPLATE.format(index=_check_index(index))


def bg(index: int) -> str:
    """Return the escape sequence setting the background to a palette index."""
    return BG_TEMPLATE.format(index=_check_index(index))


def _parse_index(digits: str) -> int | None:
    value = int(digits)
    return value if value <= MAX_INDEX else None


def classify(token: str) -> Directive:
    """Classify a directive token by its shape.

    Args:
        token: Directive text, e.g. "[[118;128m"

    Returns:
        Directive; kind INVALID when no shape matches or a number is
        outside 0-255
    """
    if _RESET_RE.fullmatch(token):
        return Directive(DirectiveKind.RESET)

    m = _BACKGROUND_RE.fullmatch(token)
    if m:
        background = _parse_index(m.group(1))
        if background is None:
            return INVALID
        return Directive(DirectiveKind.BACKGROUND, background=background)

    m = _COMBINED_RE.fullmatch(token)
    if m:
        foreground = _parse_index(m.group(1))
        background = _parse_index(m.group(2))
        if foreground is None or background is None:
            return INVALID
        return Directive(DirectiveKind.COMBINED, foreground=foreground, background=background)

    m = _FOREGROUND_RE.fullmatch(token)
    if m:
        foreground = _parse_index(m.group(1))
        if foreground is None:
            return INVALID
        return Directive(DirectiveKind.FOREGROUND, foreground=foreground)

    return INVALID


def expand(token: str) -> str:
    """Return the expansion of a single directive token ("" if invalid)."""
    directive = classify(token)
    if directive.kind is DirectiveKind.INVALID:
        logger.debug("Dropping invalid color directive: %r", token)
    return directive.expansion()


def translate(text: str) -> FormattedText:
    """Expand every shorthand directive in text and append a reset.

    Every occurrence of a given directive text gets the same expansion.
    Tokens are substituted where they were found, so a bare "[[" never
    rewrites the opener of a longer directive.

    Example:
        >>> translate("[[208mHello, world!").display_length
        13
    """
    expansions: dict[str, str] = {}

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        if token not in expansions:
            expansions[token] = expand(token)
        return expansions[token]

    content = _DIRECTIVE_RE.sub(substitute, text) + RESET
    return FormattedText.from_content(content)
