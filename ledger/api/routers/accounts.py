"""Account endpoints: creation, lookup and direct balance operations."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ledger.api.deps import get_account_service, get_current_user_id
from ledger.api.errors import to_http_exception
from ledger.modules.accounts import AccountCreateInput, AccountService
from ledger.modules.common import LedgerError
from ledger.schemas import (
    AccountCreateRequest,
    AccountListResponse,
    AccountResponse,
    AccountTransferRequest,
    AccountTransferResponse,
    BalanceAdjustmentRequest,
)

router = APIRouter()


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED, summary="Create an account")
async def create_account(
    payload: AccountCreateRequest,
    user_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await service.create_account(
            user_id,
            AccountCreateInput(
                name=payload.name,
                type=payload.type,
                currency=payload.currency,
                initial_balance=payload.initial_balance,
            ),
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return AccountResponse.model_validate(account)


@router.get("", response_model=AccountListResponse, summary="List accounts")
async def list_accounts(
    user_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountListResponse:
    try:
        accounts = await service.list_accounts(user_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return AccountListResponse(
        total=len(accounts),
        accounts=[AccountResponse.model_validate(account) for account in accounts],
    )


@router.post("/transfers", response_model=AccountTransferResponse, summary="Move money between two accounts")
async def transfer_between_accounts(
    payload: AccountTransferRequest,
    user_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountTransferResponse:
    try:
        source, destination = await service.transfer_between_accounts(
            user_id,
            payload.from_account_id,
            payload.to_account_id,
            payload.amount,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return AccountTransferResponse(
        source=AccountResponse.model_validate(source),
        destination=AccountResponse.model_validate(destination),
    )


@router.get("/{account_id}", response_model=AccountResponse, summary="Get an account")
async def get_account(
    account_id: str = Path(..., min_length=1),
    user_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await service.get(user_id, account_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"account not found: {account_id}")
    return AccountResponse.model_validate(account)


@router.post("/{account_id}/adjustments", response_model=AccountResponse, summary="Adjust an account balance")
async def adjust_balance(
    payload: BalanceAdjustmentRequest,
    account_id: str = Path(..., min_length=1),
    user_id: str = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await service.adjust_balance(user_id, account_id, payload.delta)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return AccountResponse.model_validate(account)
