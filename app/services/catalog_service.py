from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, cast

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError
from app.models import Product


class StockFilter(str, Enum):
    ANY = "any"
    OUT = "out"
    IN = "in"


@dataclass
class ProductFilters:
    search: Optional[str] = None
    category: Optional[str] = None
    stock: StockFilter = StockFilter.ANY
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_product_query(filters: ProductFilters):
    stmt = select(Product)

    search = _clean(filters.search)
    if search:
        term = search.lower()
        stmt = stmt.where(
            or_(
                func.lower(Product.name).contains(term, autoescape=True),
                func.lower(Product.description).contains(term, autoescape=True),
            )
        )

    category = _clean(filters.category)
    if category:
        stmt = stmt.where(Product.category == category)

    stock = StockFilter(filters.stock or StockFilter.ANY)
    if stock is StockFilter.OUT:
        stmt = stmt.where(Product.in_stock == 0)
    elif stock is StockFilter.IN:
        stmt = stmt.where(Product.in_stock > 0)

    if filters.min_price is not None:
        stmt = stmt.where(Product.netto_price >= filters.min_price)
    if filters.max_price is not None:
        stmt = stmt.where(Product.netto_price <= filters.max_price)

    return stmt.order_by(Product.name, Product.id)


def list_products(db: Session, filters: Optional[ProductFilters] = None) -> list[Product]:
    if filters is None:
        filters = ProductFilters()
    products = db.execute(build_product_query(filters)).scalars().all()
    return cast(list[Product], list(products))


def list_categories(db: Session) -> list[str]:
    categories = (
        db.execute(select(Product.category).distinct().order_by(Product.category))
        .scalars()
        .all()
    )
    return list(categories)


def get_product_detail(db: Session, product_id: int) -> Product:
    product = (
        db.execute(
            select(Product)
            .options(selectinload(Product.purchases), selectinload(Product.sales))
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        .scalars()
        .first()
    )
    if product is None:
        raise NotFoundError("Product", product_id)
    return product


__all__ = [
    "ProductFilters",
    "StockFilter",
    "build_product_query",
    "get_product_detail",
    "list_categories",
    "list_products",
]
