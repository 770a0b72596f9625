"""Allow running as ``python -m ansi256``."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
