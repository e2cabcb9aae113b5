from app.services.catalog_service import get_product_detail, list_categories, list_products
from app.services.ledger_service import (
    create_purchase,
    delete_purchase,
    deliver_purchase,
    record_sale,
    update_price,
)
from app.services.product_service import create_product, update_product

__all__ = [
    "create_product",
    "create_purchase",
    "delete_purchase",
    "deliver_purchase",
    "get_product_detail",
    "list_categories",
    "list_products",
    "record_sale",
    "update_price",
    "update_product",
]
