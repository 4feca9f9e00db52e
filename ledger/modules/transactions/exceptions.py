"""Transaction domain specific exceptions."""

from ledger.modules.common.exceptions import DomainInvariantError, ValidationError


class UnsupportedTypeError(ValidationError):
    """Raised for a transaction type the ledger does not know."""

    def __init__(self, type_: object) -> None:
        super().__init__(f"unsupported transaction type: {type_!r}", {"type": f"unsupported transaction type: {type_!r}"})
        self.type = type_


class CurrencyMismatchError(DomainInvariantError):
    """Raised when the draft currency differs from the source account currency."""
