"""
ansi256 - shorthand notation for terminal 256-color escape sequences.

Write "[[208mHello[[" instead of raw SGR codes; translate() expands the
shorthand and keeps track of how many columns the result occupies.
"""

from __future__ import annotations

from .cli import main
from .exceptions import Ansi256Error, UserError
from .palette import palette_rows, print_palette
from .translator import Directive, DirectiveKind, FormattedText, bg, fg, translate

__all__ = [
    "Ansi256Error",
    "Directive",
    "DirectiveKind",
    "FormattedText",
    "UserError",
    "bg",
    "fg",
    "main",
    "palette_rows",
    "print_palette",
    "translate",
]
