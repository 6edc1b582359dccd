"""
Storage interface for accounts.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from .models import Account


class AccountsRepository(ABC):
    @abstractmethod
    def create_account(self, account: Account) -> None:
        """
        Insert ``account`` if its id is not taken yet.

        Raises DuplicateAccountIdError otherwise; the stored account is left as-is.
        """

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Return a snapshot of the account, or None."""

    @abstractmethod
    def transfer_amount(self, account_from_id: str, account_to_id: str, amount: Decimal) -> None:
        """
        Move ``amount`` between two accounts as a single step.

        Raises AccountNotFoundError, InsufficientFundsError or InvalidTransferError;
        on any error no balance is changed.
        """

    @abstractmethod
    def clear_accounts(self) -> None:
        """Drop every account."""
