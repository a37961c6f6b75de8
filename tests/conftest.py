from __future__ import annotations

import logging

from typing import Iterable, List

import pytest

from pwgen.notifier import RecordingNotifier


class ScriptedRandom:
    """Random source that replays fixed 32-bit draws and counts them."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values = list(values)
        self.calls: List[int] = []

    def getrandbits(self, k: int) -> int:
        self.calls.append(k)
        if not self._values:
            return 0
        return self._values.pop(0)


class FakeClipboard:
    def __init__(self) -> None:
        self.contents: List[str] = []

    def __call__(self, text: str) -> None:
        self.contents.append(text)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def scripted_random():
    """Return the ScriptedRandom class so tests can build their own draws."""
    return ScriptedRandom


@pytest.fixture(autouse=True)
def reset_pwgen_logger():
    """Drop handlers and level set by setup_logging during a test."""
    logger = logging.getLogger('pwgen')
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
