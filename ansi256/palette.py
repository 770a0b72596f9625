"""256-color reference grid."""

from __future__ import annotations

from typing import IO

import click

from .constants import GRID_WIDTH, PALETTE_SIZE, SWATCH_SEPARATOR, SWATCH_WIDTH
from .translator import FormattedText, translate


def swatch(index: int) -> str:
    """Return shorthand for one swatch: the padded index on its own background."""
    return f"[[;{index}m{index:0{SWATCH_WIDTH}d}[["


def palette_rows() -> list[FormattedText]:
    """Build the translated grid rows, GRID_WIDTH swatches per row."""
    rows = []
    for start in range(0, PALETTE_SIZE, GRID_WIDTH):
        shorthand = SWATCH_SEPARATOR.join(swatch(i) for i in range(start, start + GRID_WIDTH))
        rows.append(translate(shorthand))
    return rows


def print_palette(file: IO[str] | None = None, *, color: bool | None = None) -> None:
    """Print the reference grid, one row per line.

    Args:
        file: Output stream (default: stdout)
        color: Passed to click.echo; None keeps escapes only on a terminal
    """
    for row in palette_rows():
        click.echo(str(row), file=file, color=color)
