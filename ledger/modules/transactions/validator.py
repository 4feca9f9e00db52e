"""Structural checks on transaction drafts, run before the engine touches the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ledger.modules.common.exceptions import InvalidAmountError, ValidationError
from ledger.modules.money import is_currency_code, to_minor_units

from .dates import parse_effective_date
from .models import TRANSACTION_TYPES, TransactionDraft, TransactionType


@dataclass(slots=True)
class ValidationResult:
    ok: bool
    errors: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ValidatedDraft:
    draft: TransactionDraft
    amount_cents: int
    effective_date: date


def _collect_errors(draft: TransactionDraft) -> dict[str, str]:
    if not isinstance(draft, TransactionDraft):
        return {"draft": "transaction data is required"}

    errors: dict[str, str] = {}

    if draft.type not in TRANSACTION_TYPES:
        errors["type"] = f"invalid transaction type: {draft.type!r}"

    try:
        if to_minor_units(draft.amount) <= 0:
            raise InvalidAmountError()
    except InvalidAmountError as exc:
        errors["amount"] = str(exc)

    if not draft.account_id:
        errors["account_id"] = "account_id is required"

    if draft.type == TransactionType.TRANSFER:
        if not draft.to_account_id:
            errors["to_account_id"] = "to_account_id is required for transfer transactions"
        elif draft.to_account_id == draft.account_id:
            errors["to_account_id"] = "source and destination accounts must be different for a transfer"
    elif draft.to_account_id:
        errors["to_account_id"] = "to_account_id is only allowed on transfer transactions"

    if draft.currency is not None and not is_currency_code(draft.currency):
        errors["currency"] = f"invalid currency code: {draft.currency!r}"

    try:
        parse_effective_date(draft.date)
    except (TypeError, ValueError):
        errors["date"] = "invalid date for transaction"

    if draft.tags is not None:
        if not isinstance(draft.tags, (list, tuple)):
            errors["tags"] = "tags must be a list of strings"
        elif not all(isinstance(tag, str) for tag in draft.tags):
            errors["tags"] = "tags must be strings"

    return errors


def validate(draft: TransactionDraft) -> ValidationResult:
    errors = _collect_errors(draft)
    return ValidationResult(ok=not errors, errors=errors)


def ensure_valid(draft: TransactionDraft) -> ValidatedDraft:
    """Validate ``draft`` and return its normalized amount and date, or raise."""
    errors = _collect_errors(draft)
    if errors:
        raise ValidationError("invalid transaction: " + "; ".join(errors.values()), errors)
    return ValidatedDraft(
        draft=draft,
        amount_cents=to_minor_units(draft.amount),
        effective_date=parse_effective_date(draft.date),
    )
