"""ansi256 constants."""

from __future__ import annotations

ESC = "\x1b"
CSI = f"{ESC}["

# SGR sequences
RESET = f"{CSI}0m"
FG_TEMPLATE = CSI + "38;5;{index}m"
BG_TEMPLATE = CSI + "48;5;{index}m"

# Palette geometry
PALETTE_SIZE = 256
MAX_INDEX = PALETTE_SIZE - 1
GRID_WIDTH = 16
SWATCH_WIDTH = 3
SWATCH_SEPARATOR = " "

# Shorthand directives: "[[" then up to 3 digits, optional ";" and up to
# 3 more digits, optional "m"
DIRECTIVE_OPENER = "[["
DIRECTIVE_PATTERN = r"\[\[\d{0,3};?\d{0,3}m?"

# Anything from ESC up to and including the next "m"
ESCAPE_PATTERN = r"\x1b[^m]*m"
