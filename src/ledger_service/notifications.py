"""
Transfer notifications.

Only a log-backed implementation exists; swap in a real sender by providing
another NotificationService.
"""

from abc import ABC, abstractmethod

from ledger_service.logging_config import get_logger
from ledger_service.store.models import Account

logger = get_logger("ledger_service.notifications")


class NotificationService(ABC):
    @abstractmethod
    def notify_about_transfer(self, account: Account, message: str) -> None:
        ...


class LoggingNotificationService(NotificationService):
    def notify_about_transfer(self, account: Account, message: str) -> None:
        logger.info("Sending notification to owner of %s: %s", account.account_id, message)
