"""
Account routes: create, look up, transfer.

Handlers are plain functions so FastAPI runs them on its thread pool; the
store does its own locking.
"""

from fastapi import APIRouter, Depends, HTTPException

from ledger_service.exceptions import DuplicateAccountIdError, LedgerError
from ledger_service.logging_config import get_logger
from ledger_service.service import AccountsService
from ledger_service.store.models import Account
from .deps import get_accounts_service
from .responses import DecimalJSONResponse
from .schemas import AccountIn, AccountOut, TransferIn
from .serializers import serialize_account

logger = get_logger("ledger_service.api.accounts")

router = APIRouter(tags=["accounts"])


@router.post("/accounts", status_code=201)
def create_account(payload: AccountIn, service: AccountsService = Depends(get_accounts_service)):
    logger.info("Creating account %s", payload.account_id)
    try:
        service.create_account(Account(account_id=payload.account_id, balance=payload.balance))
    except DuplicateAccountIdError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/accounts/{account_id}", response_model=AccountOut, response_class=DecimalJSONResponse)
def get_account(account_id: str, service: AccountsService = Depends(get_accounts_service)):
    """
    Fetch a single account by id.
    """
    logger.info("Retrieving account for id %s", account_id)
    a = service.get_account(account_id)
    if a is None:
        logger.warning("Account not found: %s", account_id)
        raise HTTPException(status_code=404, detail="Account not found")
    # returned as a response so FastAPI does not re-encode the Decimal as float
    return DecimalJSONResponse(serialize_account(a))


@router.post("/accounts/transfer", status_code=202)
def transfer_amount(payload: TransferIn, service: AccountsService = Depends(get_accounts_service)):
    logger.info(
        "Transfer request from=%s to=%s amount=%s",
        payload.account_from_id,
        payload.account_to_id,
        payload.amount,
    )
    try:
        service.transfer_amount(payload.account_from_id, payload.account_to_id, payload.amount)
    except LedgerError as e:
        logger.warning("Transfer rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
