from typing import Any, Dict

from ledger_service.store.models import Account


def serialize_account(a: Account) -> Dict[str, Any]:
    # balance stays a Decimal; DecimalJSONResponse renders it exactly
    return {
        "accountId": a.account_id,
        "balance": a.balance,
    }
