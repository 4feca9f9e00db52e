"""Translation of ledger errors into HTTP responses."""

import logging

from fastapi import HTTPException, status

from ledger.modules.accounts import AccountNotFoundError
from ledger.modules.common import CommitError, DomainInvariantError, LedgerError, ValidationError

logger = logging.getLogger(__name__)


def to_http_exception(exc: LedgerError) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=422,
            detail={"message": str(exc), "errors": exc.errors},
        )
    if isinstance(exc, AccountNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, DomainInvariantError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": str(exc), "code": type(exc).__name__},
        )
    if isinstance(exc, CommitError):
        logger.error("Commit failed after %d attempts: %s", exc.attempts, exc)
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    logger.error("Unhandled ledger error: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
