from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.errors import LedgerError
from app.core.http_errors import to_http_exception
from app.dependencies import get_db
from app.schemas.purchase import PurchaseRead
from app.services import ledger_service

router = APIRouter(prefix="/purchases", tags=["Purchases"])


@router.post("/{purchase_id}/deliver", response_model=PurchaseRead)
def deliver_purchase(purchase_id: int, db: Session = Depends(get_db)):
    try:
        purchase = ledger_service.deliver_purchase(db, purchase_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return PurchaseRead.model_validate(purchase)


@router.delete("/{purchase_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_purchase(purchase_id: int, db: Session = Depends(get_db)):
    try:
        ledger_service.delete_purchase(db, purchase_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
