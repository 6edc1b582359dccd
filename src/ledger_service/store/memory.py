"""
In-memory accounts repository.

Accounts live in a plain dict guarded by a registry lock (create / clear) and
one lock per account (read / transfer). Transfers take both account locks in
sorted id order, so two transfers over the same pair never deadlock whatever
their direction. While holding the pair a transfer re-checks the registry,
so a concurrent clear_accounts() never leaves it writing to dropped records.
"""

import threading
from contextlib import ExitStack
from dataclasses import replace
from decimal import Decimal
from typing import Dict, Optional

from ledger_service.exceptions import (
    AccountNotFoundError,
    DuplicateAccountIdError,
    InsufficientFundsError,
    InvalidTransferError,
)
from ledger_service.logging_config import get_logger

from .base import AccountsRepository
from .models import Account

logger = get_logger("ledger_service.store")


class InMemoryAccountsRepository(AccountsRepository):
    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create_account(self, account: Account) -> None:
        with self._registry_lock:
            if account.account_id in self._accounts:
                logger.warning("Duplicate account id=%s", account.account_id)
                raise DuplicateAccountIdError(account.account_id)
            # store our own copy so callers can't mutate the record behind our back
            self._accounts[account.account_id] = replace(account)
            self._locks[account.account_id] = threading.Lock()
        logger.info("Created account id=%s balance=%s", account.account_id, account.balance)

    def get_account(self, account_id: str) -> Optional[Account]:
        with self._registry_lock:
            account = self._accounts.get(account_id)
            lock = self._locks.get(account_id)
        if account is None:
            return None
        with lock:
            return replace(account)

    def transfer_amount(self, account_from_id: str, account_to_id: str, amount: Decimal) -> None:
        if amount <= 0:
            raise InvalidTransferError(f"Transfer amount must be positive, got {amount}")
        if account_from_id == account_to_id:
            raise InvalidTransferError(f"Cannot transfer from {account_from_id} to itself")

        while True:
            acct_from, acct_to, locks = self._lookup_pair(account_from_id, account_to_id)
            with ExitStack() as stack:
                for lock in locks:
                    stack.enter_context(lock)

                # the pair may have been cleared (or cleared and re-created) since the lookup
                with self._registry_lock:
                    stale = (
                        self._accounts.get(account_from_id) is not acct_from
                        or self._accounts.get(account_to_id) is not acct_to
                    )
                if stale:
                    continue

                new_balance_from = acct_from.balance - amount
                if new_balance_from < 0:
                    logger.warning(
                        "Transfer failed - insufficient funds from=%s balance=%s amount=%s",
                        account_from_id,
                        acct_from.balance,
                        amount,
                    )
                    raise InsufficientFundsError(account_from_id)

                acct_from.balance = new_balance_from
                acct_to.balance = acct_to.balance + amount
                break

        logger.info("Transfer applied from=%s to=%s amount=%s", account_from_id, account_to_id, amount)

    def _lookup_pair(self, account_from_id: str, account_to_id: str):
        with self._registry_lock:
            acct_from = self._accounts.get(account_from_id)
            acct_to = self._accounts.get(account_to_id)
            if acct_from is None:
                logger.warning("Transfer source missing id=%s", account_from_id)
                raise AccountNotFoundError(account_from_id)
            if acct_to is None:
                logger.warning("Transfer destination missing id=%s", account_to_id)
                raise AccountNotFoundError(account_to_id)
            locks = [self._locks[i] for i in sorted((account_from_id, account_to_id))]
        return acct_from, acct_to, locks

    def clear_accounts(self) -> None:
        with self._registry_lock:
            self._accounts.clear()
            self._locks.clear()
