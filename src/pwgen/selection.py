from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Optional

from .characters import POOL_ORDER, POOLS
from .errors import NoClassSelectedError
from .password_generator import RandomSource, generate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionConfig:
    """Which character classes to use, and how long the password is."""

    length: int
    use_numbers: bool = False
    use_upper: bool = False
    use_lower: bool = False
    use_symbols: bool = False

    def enabled(self) -> dict[str, bool]:
        """Return the class flags keyed by pool name, in assembly order."""
        flags = {
            'numbers': self.use_numbers,
            'upper': self.use_upper,
            'lower': self.use_lower,
            'symbols': self.use_symbols,
        }
        return {name: flags[name] for name in POOL_ORDER}

    def any_selected(self) -> bool:
        return any(self.enabled().values())


def assemble_pool(config: SelectionConfig) -> str:
    """Concatenate the enabled pools in the fixed assembly order."""
    return ''.join(POOLS[name] for name, on in config.enabled().items() if on)


def build_password(config: SelectionConfig, rng: Optional[RandomSource] = None) -> str:
    """
    Build a password for the given selection.

    Args:
        config: Selected classes and target length.
        rng: Optional random source, passed through to ``generate``.

    Returns:
        The generated password.

    Raises:
        NoClassSelectedError: If no class is enabled, or the enabled
            pools are all empty.
    """
    if not config.any_selected():
        logger.info('Rejected generation request: no character class selected')
        raise NoClassSelectedError()

    pool = assemble_pool(config)

    if not pool:
        logger.warning('Enabled character classes produced an empty pool')
        raise NoClassSelectedError()

    return generate(pool, config.length, rng)
