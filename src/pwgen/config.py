"""
Application constants.

Length bounds are enforced by the shells (terminal and Tk), not by the
generator core.
"""
from __future__ import annotations

import logging

from typing import Final

MIN_LENGTH: Final[int] = 8
MAX_LENGTH: Final[int] = 26
DEFAULT_LENGTH: Final[int] = 26

TOAST_DURATION_MS: Final[int] = 5000

WINDOW_WIDTH: Final[int] = 420
WINDOW_HEIGHT: Final[int] = 360

LOG_LEVEL: Final[int] = logging.WARNING
