from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Account:
    account_id: str
    balance: Decimal = Decimal("0")
