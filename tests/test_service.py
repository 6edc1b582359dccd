"""
Tests for AccountsService: delegation and transfer notifications.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_service.exceptions import InsufficientFundsError
from ledger_service.service import AccountsService
from ledger_service.store import Account


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(repository, notifier) -> AccountsService:
    return AccountsService(repository, notifier)


def test_get_accounts_repository(service, repository) -> None:
    assert service.get_accounts_repository() is repository


def test_transfer_notifies_both_holders(service, notifier) -> None:
    service.create_account(Account("A", Decimal("50")))
    service.create_account(Account("B", Decimal("50")))

    service.transfer_amount("A", "B", Decimal("20"))

    assert notifier.notify_about_transfer.call_count == 2
    (debit_account, debit_msg), _ = notifier.notify_about_transfer.call_args_list[0]
    (credit_account, credit_msg), _ = notifier.notify_about_transfer.call_args_list[1]
    assert debit_account.account_id == "A"
    assert debit_account.balance == Decimal("30")
    assert "transferred to account B" in debit_msg
    assert credit_account.account_id == "B"
    assert credit_account.balance == Decimal("70")
    assert "received from account A" in credit_msg


def test_failed_transfer_sends_no_notification(service, notifier) -> None:
    service.create_account(Account("A", Decimal("50")))
    service.create_account(Account("B", Decimal("50")))

    with pytest.raises(InsufficientFundsError):
        service.transfer_amount("A", "B", Decimal("60"))

    notifier.notify_about_transfer.assert_not_called()
