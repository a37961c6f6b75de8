from __future__ import annotations

import logging

from typing import Callable, Optional

from .characters import POOL_ORDER
from .config import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from .errors import ClipboardError, NoClassSelectedError
from .notifier import LoggingNotifier, Notification, Notifier
from .password_generator import RandomSource
from .selection import SelectionConfig, build_password

logger = logging.getLogger(__name__)

GENERATED_MESSAGE = 'Password generated successfully'
COPIED_MESSAGE = 'Password copied to clipboard successfully'
NOTHING_TO_COPY_MESSAGE = 'Failed to copy password. No password generated.'


class GeneratorSession:
    """
    Per-session state behind the generator screens.

    Holds the desired length, the four class flags and the last
    generated password. Results of user actions are reported through
    ``notify``; the clipboard is written through ``clipboard``.
    """

    def __init__(
        self,
        clipboard: Callable[[str], None],
        notify: Optional[Notifier] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._clipboard = clipboard
        self._notify: Notifier = notify or LoggingNotifier()
        self._rng = rng

        self._length = DEFAULT_LENGTH
        self._options: dict[str, bool] = {name: False for name in POOL_ORDER}
        self.password = ''

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f'Password length must be an integer, got {value!r}.'
            raise ValueError(msg)
        if not MIN_LENGTH <= value <= MAX_LENGTH:
            msg = f'Password length must be between {MIN_LENGTH} and {MAX_LENGTH}.'
            raise ValueError(msg)
        self._length = value

    def get_option(self, name: str) -> bool:
        return self._options[name]

    def set_option(self, name: str, enabled: bool) -> None:
        """
        Enable or disable one character class.

        Raises:
            KeyError: If ``name`` is not one of the known pool names.
        """
        if name not in self._options:
            raise KeyError(name)
        self._options[name] = bool(enabled)

    def toggle_option(self, name: str) -> bool:
        """Flip one character class and return its new state."""
        self.set_option(name, not self.get_option(name))
        return self._options[name]

    def config(self) -> SelectionConfig:
        """Return a snapshot of the current selection."""
        return SelectionConfig(
            length=self._length,
            use_numbers=self._options['numbers'],
            use_upper=self._options['upper'],
            use_lower=self._options['lower'],
            use_symbols=self._options['symbols'],
        )

    def generate(self) -> str | None:
        """
        Generate a new password from the current selection.

        Returns:
            The new password, or None if no class is selected. The
            previous password is kept in that case.
        """
        try:
            password = build_password(self.config(), self._rng)
        except NoClassSelectedError as exc:
            self._notify(Notification(str(exc), is_error=True))
            return None

        self.password = password
        self._notify(Notification(GENERATED_MESSAGE))
        return password

    def copy_to_clipboard(self) -> bool:
        """
        Copy the last generated password to the clipboard.

        Returns:
            True if the password was copied, False otherwise.
        """
        if not self.password:
            self._notify(Notification(NOTHING_TO_COPY_MESSAGE, is_error=True))
            return False

        try:
            self._clipboard(self.password)
        except ClipboardError as exc:
            logger.warning('Clipboard write failed: %s', exc)
            self._notify(Notification(str(exc), is_error=True))
            return False

        self._notify(Notification(COPIED_MESSAGE))
        return True
