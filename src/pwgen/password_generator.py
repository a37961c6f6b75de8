from __future__ import annotations

import logging
import random

from typing import Final, Optional, Protocol

logger = logging.getLogger(__name__)

DRAW_BITS: Final[int] = 32
DRAW_RANGE: Final[int] = 1 << DRAW_BITS


class RandomSource(Protocol):
    """Anything that can hand out unsigned integers of a given bit width."""

    def getrandbits(self, k: int, /) -> int: ...


def _draw_index(size: int, rng: RandomSource) -> int:
    """
    Draw one index uniformly from ``[0, size)``.

    A 32-bit draw is reduced modulo ``size``. Draws falling in the
    incomplete last block are rejected so every index is equally likely.
    """
    limit = DRAW_RANGE - (DRAW_RANGE % size)

    while True:
        value = rng.getrandbits(DRAW_BITS)
        if value < limit:
            return value % size


def generate(pool: str, length: int, rng: Optional[RandomSource] = None) -> str:
    """
    Return a password of ``length`` characters drawn from ``pool``.

    Args:
        pool: Characters to sample from. Must not be empty.
        length: Number of characters to draw. Must be at least 1.
        rng: Random source. Defaults to ``random.SystemRandom``, which
            reads from the operating system CSPRNG.

    Returns:
        The generated password.

    Raises:
        ValueError: If ``pool`` is empty or ``length`` is below 1.
    """
    if not pool:
        msg = 'Character pool must not be empty.'
        raise ValueError(msg)
    if length < 1:
        msg = f'Password length must be at least 1, got {length}.'
        raise ValueError(msg)

    if rng is None:
        rng = random.SystemRandom()

    size = len(pool)
    password = ''.join(pool[_draw_index(size, rng)] for _ in range(length))
    logger.debug('Generated %d characters from a pool of %d', length, size)
    return password
