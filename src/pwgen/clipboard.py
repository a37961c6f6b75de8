from __future__ import annotations

import pyperclip

from .errors import ClipboardError


def copy_text(text: str) -> None:
    """
    Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f'Clipboard unavailable: {exc}') from exc
