from __future__ import annotations

import tkinter as tk

from ..config import TOAST_DURATION_MS
from ..notifier import Notification

SUCCESS_COLORS = ('#07bc0c', 'white')
ERROR_COLORS = ('#e74c3c', 'white')


class Toast(tk.Toplevel):
    """
    Borderless notification shown at the top centre of its parent.

    Closes itself after ``duration_ms`` or when clicked.
    """

    def __init__(
        self,
        parent: tk.Misc,
        notification: Notification,
        duration_ms: int = TOAST_DURATION_MS,
    ) -> None:
        super().__init__(parent)
        self.overrideredirect(True)
        self.attributes('-topmost', True)

        background, foreground = ERROR_COLORS if notification.is_error else SUCCESS_COLORS
        label = tk.Label(
            self,
            text=notification.message,
            bg=background,
            fg=foreground,
            padx=16,
            pady=10,
            wraplength=360,
        )
        label.pack(fill='both', expand=True)
        label.bind('<Button-1>', lambda _event: self.close())

        self._place_over(parent)
        self._after_id: str | None = self.after(duration_ms, self.close)

    def _place_over(self, parent: tk.Misc) -> None:
        """Position the toast horizontally centred near the parent's top edge."""
        self.update_idletasks()
        x = parent.winfo_rootx() + (parent.winfo_width() - self.winfo_reqwidth()) // 2
        y = parent.winfo_rooty() + 10
        self.geometry(f'+{x}+{y}')

    def close(self) -> None:
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None
        self.destroy()
