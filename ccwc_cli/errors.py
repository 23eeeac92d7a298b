"""Exception types raised by the ccwc CLI."""

from typing import Optional


class CcwcError(Exception):
    """Base class for all ccwc errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputSourceError(CcwcError):
    """Raised when a file or standard input cannot be read."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class ArgumentError(CcwcError):
    """Raised when command line arguments cannot form an option set."""
