from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass

SUCCESS = "success"
ERROR = "error"

SUCCESS_MESSAGES = {
    "create": "User added successfully!",
    "update": "User updated successfully!",
    "delete": "User deleted successfully!",
}
FAILURE_MESSAGES = {
    "fetch": "Failed to fetch users. Please try again later.",
    "create": "Failed to add user. Please try again.",
    "update": "Failed to update user. Please try again.",
    "delete": "Failed to delete user. Please try again.",
}


@dataclass(frozen=True)
class Notification:
    notification_id: int
    level: str
    message: str


class Notifier:
    """Stack of transient toasts, oldest first."""

    def __init__(self, duration_ms: int = 5000) -> None:
        # The view schedules dismiss() this long after each push.
        self.duration_ms = max(1, duration_ms)
        self._ids = itertools.count(1)
        self._active: list[Notification] = []
        self._listeners: list[Callable[[Notification | None], None]] = []

    def subscribe(self, listener: Callable[[Notification | None], None]) -> None:
        self._listeners.append(listener)

    def success(self, message: str) -> Notification:
        return self._push(SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._push(ERROR, message)

    def notify_success(self, action: str) -> Notification | None:
        message = SUCCESS_MESSAGES.get(action)
        return self.success(message) if message else None

    def notify_failure(self, action: str) -> Notification:
        return self.error(FAILURE_MESSAGES[action])

    def active(self) -> list[Notification]:
        return list(self._active)

    def dismiss(self, notification_id: int) -> None:
        remaining = [item for item in self._active if item.notification_id != notification_id]
        if len(remaining) != len(self._active):
            self._active = remaining
            self._emit(None)

    def _push(self, level: str, message: str) -> Notification:
        notification = Notification(notification_id=next(self._ids), level=level, message=message)
        self._active.append(notification)
        self._emit(notification)
        return notification

    def _emit(self, notification: Notification | None) -> None:
        for listener in list(self._listeners):
            listener(notification)
