"""ansi256 command implementations."""

from __future__ import annotations

from .palette import cmd_palette
from .render import cmd_render

__all__ = [
    "cmd_palette",
    "cmd_render",
]
