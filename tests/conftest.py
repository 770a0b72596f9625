"""Shared pytest fixtures for ansi256 tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def restore_package_logger() -> Generator[None, None, None]:
    """Undo handlers and level changes made by setup_logging()."""
    logger = logging.getLogger("ansi256")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def shorthand_file(tmp_path: Path) -> Path:
    """Create a file with one shorthand line per row."""
    path = tmp_path / "lines.txt"
    path.write_text("[[208mHello, world!\n[[;160WARNING![[ user not found!\nplain\n")
    return path
