from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(usecwd=True), override=False)

import os
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Bounds on any money value accepted over HTTP.
MONEY_MAX_DIGITS = 30
MONEY_DECIMAL_PLACES = 10


def min_transfer_amount() -> Decimal:
    """
    Lowest amount POST /v1/accounts/transfer accepts (MIN_TRANSFER_AMOUNT, default 1).

    Read per request; the store itself takes any positive amount.
    """
    return Decimal(os.getenv("MIN_TRANSFER_AMOUNT", "1"))


class AccountIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId", min_length=1, examples=["Id-123"])
    balance: Decimal = Field(
        ...,
        ge=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        examples=[1000],
    )


class AccountOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId")
    balance: Decimal


class TransferIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_from_id: str = Field(..., alias="accountFromId", min_length=1, examples=["ACC-0001"])
    account_to_id: str = Field(..., alias="accountToId", min_length=1, examples=["ACC-0002"])
    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        examples=[20],
    )

    @field_validator("amount")
    @classmethod
    def check_min_amount(cls, v: Decimal) -> Decimal:
        minimum = min_transfer_amount()
        if v < minimum:
            raise ValueError(f"Amount must be at least {minimum}.")
        return v

    @model_validator(mode="after")
    def check_distinct_accounts(self):
        if self.account_from_id == self.account_to_id:
            raise ValueError("accountFromId and accountToId must differ")
        return self
