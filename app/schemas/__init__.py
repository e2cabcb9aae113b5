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

__all__ = [
    "ProductCreate",
    "ProductListResponse",
    "ProductPriceUpdate",
    "ProductRead",
    "ProductReadWithHistory",
    "ProductUpdate",
    "PurchaseCreate",
    "PurchaseRead",
    "SaleCreate",
    "SaleRead",
]
