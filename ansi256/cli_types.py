"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderArgs:
    """Arguments for render command."""

    text: list[str]
    from_file: str | None
    json: bool
    length: bool
    color: bool | None


@dataclass
class PaletteArgs:
    """Arguments for palette command."""

    color: bool | None
