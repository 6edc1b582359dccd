"""
Domain errors raised by the ledger store.

All of them are business-rule violations: callers get them synchronously and
nothing is retried.
"""


class LedgerError(Exception):
    """Base class for ledger errors."""


class DuplicateAccountIdError(LedgerError):
    """Raised when creating an account whose id is already taken."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account id {account_id} already exists!")


class AccountNotFoundError(LedgerError):
    """Raised when a transfer references an unknown account."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"{account_id} does not exist")


class InsufficientFundsError(LedgerError):
    """Raised when a transfer would drive the source balance below zero."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"{account_id} does not have enough balance for this transfer to succeed")


class InvalidTransferError(LedgerError):
    """Raised for transfers the store refuses outright (non-positive amount, same account)."""
