"""Transaction endpoints backed by the transaction engine."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, status

from ledger.api.deps import get_app_container, get_current_user_id, get_transaction_engine
from ledger.api.errors import to_http_exception
from ledger.core.config import LedgerSettings
from ledger.core.container import ApplicationContainer
from ledger.modules.common import LedgerError
from ledger.modules.money import to_reference_currency
from ledger.modules.transactions import CommittedTransaction, TransactionDraft, TransactionEngine
from ledger.schemas import TransactionCreateRequest, TransactionListResponse, TransactionResponse

router = APIRouter()


def _to_response(record: CommittedTransaction, ledger: LedgerSettings) -> TransactionResponse:
    response = TransactionResponse.model_validate(record)
    rate = ledger.exchange_rates.get(record.currency)
    if record.currency == ledger.reference_currency or rate is not None:
        response.reference_amount = to_reference_currency(
            record.amount,
            record.currency,
            rate,
            reference_currency=ledger.reference_currency,
        )
        response.reference_currency = ledger.reference_currency
    return response


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED, summary="Record a transaction")
async def create_transaction(
    payload: TransactionCreateRequest,
    idempotency_key: Optional[str] = Header(default=None, max_length=128),
    user_id: str = Depends(get_current_user_id),
    engine: TransactionEngine = Depends(get_transaction_engine),
    container: ApplicationContainer = Depends(get_app_container),
) -> TransactionResponse:
    draft = TransactionDraft(
        type=payload.type,
        amount=payload.amount,
        account_id=payload.account_id,
        to_account_id=payload.to_account_id,
        currency=payload.currency,
        date=payload.date,
        category_id=payload.category_id,
        goal_id=payload.goal_id,
        description=payload.description,
        notes=payload.notes,
        tags=payload.tags,
        idempotency_key=payload.idempotency_key or idempotency_key,
    )
    try:
        committed = await engine.create_transaction(user_id, draft)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return _to_response(committed, container.settings.ledger)


@router.get("", response_model=TransactionListResponse, summary="List recent transactions")
async def list_transactions(
    account_id: Optional[str] = Query(default=None),
    limit: int = Query(default=20, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    user_id: str = Depends(get_current_user_id),
    engine: TransactionEngine = Depends(get_transaction_engine),
    container: ApplicationContainer = Depends(get_app_container),
) -> TransactionListResponse:
    try:
        records = await engine.list_transactions(user_id, account_id=account_id, limit=limit, offset=offset)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return TransactionListResponse(
        total=len(records),
        transactions=[_to_response(record, container.settings.ledger) for record in records],
    )
