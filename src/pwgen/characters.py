from __future__ import annotations

import string

from typing import Final

NUMBERS: Final[str] = string.digits
UPPERCASE_LETTERS: Final[str] = string.ascii_uppercase
LOWERCASE_LETTERS: Final[str] = string.ascii_lowercase
SPECIAL_CHARACTERS: Final[str] = '!@#$%^&*()-_=+[]{};:,.?/'

# Assembly order of the enabled pools.
POOL_ORDER: Final[tuple[str, ...]] = ('numbers', 'upper', 'lower', 'symbols')

POOLS: Final[dict[str, str]] = {
    'numbers': NUMBERS,
    'upper': UPPERCASE_LETTERS,
    'lower': LOWERCASE_LETTERS,
    'symbols': SPECIAL_CHARACTERS,
}
