"""ansi256 exception classes."""

from __future__ import annotations


class Ansi256Error(RuntimeError):
    """Base exception for ansi256 errors."""


class UserError(Ansi256Error):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc
