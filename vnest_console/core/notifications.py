"""Transient user-facing notifications (the console's alert strip)."""

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'


@dataclass(frozen=True)
class Notification:
    message: str
    level: str = SUCCESS


class Notifier:
    """Collects notifications until the next page render drains them"""

    def __init__(self):
        self._pending: List[Notification] = []

    def success(self, message: str) -> None:
        self._pending.append(Notification(message, SUCCESS))

    def error(self, message: str) -> None:
        logger.warning(f"Notifying user: {message}")
        self._pending.append(Notification(message, ERROR))

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        drained, self._pending = self._pending, []
        return drained
