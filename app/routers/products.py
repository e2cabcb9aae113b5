from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.errors import LedgerError
from app.core.http_errors import to_http_exception
from app.dependencies import get_db, get_price_rng
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductPriceUpdate,
    ProductRead,
    ProductReadWithHistory,
    ProductUpdate,
)
from app.schemas.purchase import PurchaseCreate, PurchaseRead
from app.schemas.sale import SaleCreate, SaleRead
from app.services import catalog_service, ledger_service, product_service
from app.services.catalog_service import ProductFilters, StockFilter

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
def list_products(
    search: Optional[str] = Query(None, description="Substring of name or description"),
    category: Optional[str] = Query(None, description="Exact category label"),
    stock: StockFilter = Query(StockFilter.ANY, description="any | out | in"),
    min_price: Optional[Decimal] = Query(None, ge=0, description="Inclusive lower netto price bound"),
    max_price: Optional[Decimal] = Query(None, ge=0, description="Inclusive upper netto price bound"),
    db: Session = Depends(get_db),
):
    filters = ProductFilters(
        search=search,
        category=category,
        stock=stock,
        min_price=min_price,
        max_price=max_price,
    )
    products = catalog_service.list_products(db, filters)
    return ProductListResponse(
        count=len(products),
        categories=catalog_service.list_categories(db),
        results=[ProductRead.model_validate(product) for product in products],
    )


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return catalog_service.list_categories(db)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    try:
        product = product_service.create_product(db, **payload.model_dump())
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return ProductRead.model_validate(product)


@router.get("/{product_id}", response_model=ProductReadWithHistory)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product = catalog_service.get_product_detail(db, product_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return ProductReadWithHistory.model_validate(product)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    changes = payload.model_dump(exclude_unset=True, exclude={"version"})
    try:
        product = product_service.update_product(
            db,
            product_id,
            changes,
            expected_version=payload.version,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ProductRead.model_validate(product)


@router.post("/{product_id}/price", response_model=ProductRead)
def update_price(product_id: int, payload: ProductPriceUpdate, db: Session = Depends(get_db)):
    try:
        product = ledger_service.update_price(
            db,
            product_id,
            payload.netto_price,
            expected_version=payload.version,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return ProductRead.model_validate(product)


@router.post(
    "/{product_id}/purchases",
    response_model=PurchaseRead,
    status_code=status.HTTP_201_CREATED,
)
def add_purchase(
    product_id: int,
    payload: PurchaseCreate,
    db: Session = Depends(get_db),
    rng=Depends(get_price_rng),
):
    try:
        purchase = ledger_service.create_purchase(
            db,
            product_id,
            payload.quantity,
            payload.expected_delivery,
            rng=rng,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return PurchaseRead.model_validate(purchase)


@router.post(
    "/{product_id}/sales",
    response_model=SaleRead,
    status_code=status.HTTP_201_CREATED,
)
def add_sale(product_id: int, payload: SaleCreate, db: Session = Depends(get_db)):
    try:
        sale = ledger_service.record_sale(
            db,
            product_id,
            payload.quantity,
            payload.unit_price,
            payload.buyer_company,
            payload.sale_date,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return SaleRead.model_validate(sale)


__all__ = ["router"]
