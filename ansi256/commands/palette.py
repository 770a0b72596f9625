"""ansi256 palette command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..palette import print_palette

if TYPE_CHECKING:
    from ..cli_types import PaletteArgs

logger = logging.getLogger(__name__)


def cmd_palette(args: PaletteArgs) -> None:
    """Print the 256-color reference grid to stdout."""
    logger.debug("Printing palette (color=%s)", args.color)
    print_palette(color=args.color)
