from __future__ import annotations

from .characters import LOWERCASE_LETTERS, NUMBERS, SPECIAL_CHARACTERS, UPPERCASE_LETTERS
from .errors import ClipboardError, NoClassSelectedError, PasswordGeneratorError
from .password_generator import generate
from .selection import SelectionConfig, assemble_pool, build_password

__all__ = [
    'LOWERCASE_LETTERS',
    'NUMBERS',
    'SPECIAL_CHARACTERS',
    'UPPERCASE_LETTERS',
    'ClipboardError',
    'NoClassSelectedError',
    'PasswordGeneratorError',
    'SelectionConfig',
    'assemble_pool',
    'build_password',
    'generate',
]
