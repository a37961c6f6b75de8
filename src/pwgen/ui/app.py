from __future__ import annotations

import logging
import tkinter as tk

from tkinter import ttk

from ..config import LOG_LEVEL, WINDOW_HEIGHT, WINDOW_WIDTH
from ..logging_config import setup_logging
from ..notifier import LoggingNotifier, Notification
from .frames import GeneratorFrame
from .widgets import Toast

logger = logging.getLogger(__name__)


class PasswordGeneratorApp(tk.Tk):
    """
    Top-level Tkinter window for the password generator.

    This GUI is a thin layer over GeneratorSession:
    - GeneratorFrame owns the session and its widgets.
    - Notifications are logged and shown as toasts.
    """

    def __init__(self) -> None:
        super().__init__()

        self.title('Password Generator')
        self.geometry(f'{WINDOW_WIDTH}x{WINDOW_HEIGHT}')
        self.minsize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._log_notification = LoggingNotifier()

        container = ttk.Frame(self)
        container.pack(fill='both', expand=True)

        self.frame = GeneratorFrame(parent=container, controller=self)
        self.frame.pack(fill='both', expand=True)

    def notify(self, notification: Notification) -> None:
        """Log a notification and display it as a toast."""
        self._log_notification(notification)
        Toast(self, notification)

    def notify_error(self, message: str) -> None:
        self.notify(Notification(message, is_error=True))


def main() -> None:
    """Entry point for launching the Tkinter GUI."""
    setup_logging(LOG_LEVEL)
    app = PasswordGeneratorApp()
    app.mainloop()


if __name__ == '__main__':
    main()
