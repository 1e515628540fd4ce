import logging
from typing import Callable, Optional

from groupledger.schemas.notifications import LedgerNotification

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[LedgerNotification], None]


class Notifier:
    """Fans ledger notifications out to subscribed handlers, in subscription order."""

    def __init__(self, handlers: Optional[list[NotificationHandler]] = None) -> None:
        self._handlers: list[NotificationHandler] = list(handlers or [])

    def subscribe(self, handler: NotificationHandler) -> None:
        self._handlers.append(handler)

    def emit(self, notification: LedgerNotification) -> None:
        for handler in self._handlers:
            handler(notification)


class NotificationOutbox:
    """
    Holds notifications raised inside a transaction.

    Nothing reaches the notifier until `publish` is called after the commit.
    `discard` drops everything queued by a transaction that rolled back.
    """

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier
        self._pending: list[LedgerNotification] = []

    @property
    def pending(self) -> list[LedgerNotification]:
        return list(self._pending)

    def emit(self, notification: LedgerNotification) -> None:
        self._pending.append(notification)

    def publish(self) -> None:
        pending, self._pending = self._pending, []
        for notification in pending:
            self.notifier.emit(notification)

    def discard(self) -> None:
        self._pending.clear()


def log_notification(notification: LedgerNotification) -> None:
    payload = notification.model_dump(mode="json")
    logger.info(
        "Ledger notification event_type=%s group_id=%s",
        payload["event_type"],
        notification.group_id,
        extra={"group_id": notification.group_id, "notification": payload},
    )
