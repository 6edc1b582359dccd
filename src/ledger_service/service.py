"""
AccountsService: the façade the HTTP layer talks to.

Wraps an AccountsRepository and tells both account holders about every
completed transfer.
"""

from decimal import Decimal
from typing import Optional

from ledger_service.logging_config import get_logger
from ledger_service.notifications import NotificationService
from ledger_service.store import Account, AccountsRepository

logger = get_logger("ledger_service.service")


class AccountsService:
    def __init__(self, accounts_repository: AccountsRepository, notification_service: NotificationService):
        self.accounts_repository = accounts_repository
        self.notification_service = notification_service

    def get_accounts_repository(self) -> AccountsRepository:
        return self.accounts_repository

    def create_account(self, account: Account) -> None:
        self.accounts_repository.create_account(account)

    def get_account(self, account_id: str) -> Optional[Account]:
        return self.accounts_repository.get_account(account_id)

    def transfer_amount(self, account_from_id: str, account_to_id: str, amount: Decimal) -> None:
        """
        Move funds, then notify both sides.

        Store errors propagate untouched; nobody is notified about a failed transfer.
        """
        self.accounts_repository.transfer_amount(account_from_id, account_to_id, amount)

        acct_from = self.accounts_repository.get_account(account_from_id)
        acct_to = self.accounts_repository.get_account(account_to_id)
        # accounts may have been cleared in between
        if acct_from is not None:
            self.notification_service.notify_about_transfer(
                acct_from, f"Amount {amount} transferred to account {account_to_id}"
            )
        if acct_to is not None:
            self.notification_service.notify_about_transfer(
                acct_to, f"Amount {amount} received from account {account_from_id}"
            )
