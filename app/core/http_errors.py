from fastapi import HTTPException, status

from app.core.constants import INSUFFICIENT_STOCK_MESSAGE
from app.core.errors import InsufficientStockError, LedgerError, NotFoundError


def to_http_exception(exc: LedgerError) -> HTTPException:
    """NotFoundError is 404; stock shortfalls and stale writes (ConflictError) are 409."""
    if isinstance(exc, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="{} not found.".format(exc.entity),
        )
    if isinstance(exc, InsufficientStockError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=INSUFFICIENT_STOCK_MESSAGE,
        )
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


__all__ = ["to_http_exception"]
