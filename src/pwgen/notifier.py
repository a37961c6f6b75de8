from __future__ import annotations

import logging

from dataclasses import dataclass, field
from typing import List, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A message for the user, flagged as success or error."""

    message: str
    is_error: bool = False


class Notifier(Protocol):
    def __call__(self, notification: Notification) -> None: ...


class LoggingNotifier:
    """Send notifications to the package logger."""

    def __call__(self, notification: Notification) -> None:
        if notification.is_error:
            logger.error(notification.message)
        else:
            logger.info(notification.message)


@dataclass
class RecordingNotifier:
    """Keep every notification received, oldest first."""

    notifications: List[Notification] = field(default_factory=list)

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def last(self) -> Notification | None:
        """Return the most recent notification, or None if there is none."""
        if not self.notifications:
            return None
        return self.notifications[-1]
