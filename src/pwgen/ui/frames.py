from __future__ import annotations

import tkinter as tk

from tkinter import ttk
from typing import TYPE_CHECKING

from ..config import MAX_LENGTH, MIN_LENGTH
from ..session import GeneratorSession

if TYPE_CHECKING:
    from .app import PasswordGeneratorApp

CHECKBOX_OPTIONS = (
    ('upper', 'Add Uppercase Letters'),
    ('lower', 'Add Lowercase Letters'),
    ('numbers', 'Include Numbers'),
    ('symbols', 'Include Symbols'),
)


class GeneratorFrame(ttk.Frame):
    """Password display, length input, class checkboxes and action buttons."""

    def __init__(self, parent: tk.Widget, controller: PasswordGeneratorApp) -> None:
        super().__init__(parent, padding=20)
        self.controller = controller
        self.session = GeneratorSession(
            clipboard=self._write_clipboard,
            notify=controller.notify,
        )

        ttk.Label(self, text='Password Generator', font=('TkDefaultFont', 14)).pack(pady=(0, 10))

        display = ttk.Frame(self)
        display.pack(fill='x', pady=5)
        self._password_var = tk.StringVar()
        ttk.Entry(
            display,
            textvariable=self._password_var,
            state='readonly',
            font=('TkFixedFont', 12),
        ).pack(side='left', fill='x', expand=True)
        ttk.Button(display, text='Copy', command=self._on_copy).pack(side='left', padx=(5, 0))

        length_row = ttk.Frame(self)
        length_row.pack(fill='x', pady=5)
        ttk.Label(length_row, text='Password length').pack(side='left')
        self._length_var = tk.StringVar(value=str(self.session.length))
        ttk.Spinbox(
            length_row,
            from_=MIN_LENGTH,
            to=MAX_LENGTH,
            textvariable=self._length_var,
            width=5,
        ).pack(side='right')

        self._option_vars: dict[str, tk.BooleanVar] = {}
        for name, label in CHECKBOX_OPTIONS:
            var = tk.BooleanVar(value=self.session.get_option(name))
            self._option_vars[name] = var
            ttk.Checkbutton(
                self,
                text=label,
                variable=var,
                command=lambda n=name, v=var: self.session.set_option(n, v.get()),
            ).pack(anchor='w', pady=2)

        ttk.Button(self, text='Generate Password', command=self._on_generate).pack(fill='x', pady=(15, 0))

    def _write_clipboard(self, text: str) -> None:
        self.clipboard_clear()
        self.clipboard_append(text)
        self.update()  # keep the selection after the window loses focus

    def _apply_length(self) -> bool:
        """
        Push the spinbox value into the session.

        Returns:
            True if the value was accepted, False otherwise (an error is shown).
        """
        raw = self._length_var.get().strip()

        try:
            self.session.length = int(raw)
        except ValueError:
            self.controller.notify_error(f'Password length must be between {MIN_LENGTH} and {MAX_LENGTH}.')
            self._length_var.set(str(self.session.length))
            return False
        return True

    def _on_generate(self) -> None:
        """Generate a password and show it in the display field."""
        if not self._apply_length():
            return

        if self.session.generate() is not None:
            self._password_var.set(self.session.password)

    def _on_copy(self) -> None:
        self.session.copy_to_clipboard()
