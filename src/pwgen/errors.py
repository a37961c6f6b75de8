from __future__ import annotations

NO_CLASS_SELECTED_MESSAGE = 'To generate a password, you must select at least one checkbox'


class PasswordGeneratorError(Exception):
    """Base class for errors raised by pwgen."""


class NoClassSelectedError(PasswordGeneratorError, ValueError):
    """Raised when the assembled character pool would be empty."""

    def __init__(self, msg: str = NO_CLASS_SELECTED_MESSAGE) -> None:
        super().__init__(msg)


class ClipboardError(PasswordGeneratorError):
    """Raised when the system clipboard cannot be written."""
