"""
Transient user notifications.

Synchronizers publish a Notification for every user-facing outcome. This is a
side channel: it never carries state, and the return value of an operation is
independent of what was published. Front ends subscribe to render toasts;
tests subscribe to assert on the text.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


NotificationListener = Callable[[Notification], None]


class Notifier:
    """Fan-out of notifications to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: NotificationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, notification: Notification) -> None:
        if notification.level == NotificationLevel.ERROR:
            logger.warning("Notify: %s", notification.message)
        else:
            logger.info("Notify: %s", notification.message)

        for listener in list(self._listeners):
            listener(notification)

    def success(self, message: str) -> None:
        self.publish(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self.publish(Notification(NotificationLevel.ERROR, message))
