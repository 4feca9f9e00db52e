"""Request-scoped dependency providers."""

from fastapi import Depends, Header, HTTPException, Request, status

from ledger.core.container import ApplicationContainer
from ledger.modules.accounts import AccountService
from ledger.modules.transactions import TransactionEngine


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Identity is established upstream and forwarded as ``X-User-Id``."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="missing X-User-Id header")
    return x_user_id


def get_account_service(container: ApplicationContainer = Depends(get_app_container)) -> AccountService:
    return container.account_service()


def get_transaction_engine(container: ApplicationContainer = Depends(get_app_container)) -> TransactionEngine:
    return container.transaction_engine()


__all__ = [
    "get_account_service",
    "get_app_container",
    "get_current_user_id",
    "get_transaction_engine",
]
