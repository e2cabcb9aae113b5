"""
Stock ledger: the only code paths allowed to change ``Product.in_stock``.

Purchase lifecycle::

    pending --deliver--> delivered   (terminal, stock += quantity)
    pending --delete---> removed     (terminal)

Sales are append-only and decrement stock, never below zero. Every
operation commits its changes as one unit or not at all.
"""
import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.config import get_settings
from app.core.constants import BUYER_COMPANY_MAX_LENGTH
from app.core.errors import InsufficientStockError, NotFoundError
from app.core.pricing import to_money, varied_unit_price
from app.models import Product, Purchase, Sale
from app.services.product_service import commit_changes, ensure_version, load_product

logger = logging.getLogger(__name__)


def _require_positive(quantity: int) -> None:
    if quantity is None or quantity <= 0:
        raise ValueError("quantity must be positive.")


def _load_purchase(db: Session, purchase_id: int) -> Purchase:
    purchase = db.get(Purchase, purchase_id)
    if purchase is None:
        raise NotFoundError("Purchase", purchase_id)
    return purchase


def create_purchase(
    db: Session,
    product_id: int,
    quantity: int,
    expected_delivery: date,
    *,
    rng=None,
) -> Purchase:
    _require_positive(quantity)
    product = load_product(db, product_id)

    settings = get_settings()
    unit_price = varied_unit_price(
        product.netto_price,
        rng,
        settings.PRICE_VARIANCE_MIN_PERCENT,
        settings.PRICE_VARIANCE_MAX_PERCENT,
    )
    purchase = Purchase(
        product_id=product.id,
        quantity=quantity,
        unit_price=unit_price,
        expected_delivery=expected_delivery,
    )
    db.add(purchase)
    commit_changes(db, "Purchase", None)

    logger.info(
        "Purchase %s created for product %s: %s x %s, expected %s.",
        purchase.id,
        product.id,
        quantity,
        unit_price,
        expected_delivery,
        extra={"purchase_id": purchase.id, "product_id": product.id, "quantity": quantity},
    )
    return purchase


def deliver_purchase(
    db: Session,
    purchase_id: int,
    *,
    delivered_at: Optional[datetime] = None,
) -> Purchase:
    purchase = _load_purchase(db, purchase_id)
    if purchase.delivered:
        logger.info("Purchase %s already delivered; nothing to do.", purchase_id)
        return purchase

    product = load_product(db, purchase.product_id)
    if delivered_at is None:
        delivered_at = datetime.now(timezone.utc)

    purchase.actual_delivery = delivered_at
    product.in_stock += purchase.quantity
    commit_changes(db, "Purchase", purchase_id)

    logger.info(
        "Purchase %s delivered; product %s stock now %s.",
        purchase_id,
        product.id,
        product.in_stock,
        extra={"purchase_id": purchase_id, "product_id": product.id, "in_stock": product.in_stock},
    )
    return purchase


def delete_purchase(db: Session, purchase_id: int) -> None:
    purchase = _load_purchase(db, purchase_id)
    if purchase.delivered:
        logger.info("Purchase %s is delivered and is kept.", purchase_id)
        return

    db.delete(purchase)
    commit_changes(db, "Purchase", purchase_id)
    logger.info("Pending purchase %s deleted.", purchase_id, extra={"purchase_id": purchase_id})


def record_sale(
    db: Session,
    product_id: int,
    quantity: int,
    unit_price,
    buyer_company: str,
    sale_date: date,
) -> Sale:
    _require_positive(quantity)
    buyer_company = (buyer_company or "").strip()
    if not buyer_company:
        raise ValueError("buyer_company is required.")
    if len(buyer_company) > BUYER_COMPANY_MAX_LENGTH:
        raise ValueError(
            "buyer_company must be at most {} characters.".format(BUYER_COMPANY_MAX_LENGTH)
        )

    product = load_product(db, product_id)
    if product.in_stock < quantity:
        logger.warning(
            "Sale rejected for product %s: requested %s, in stock %s.",
            product_id,
            quantity,
            product.in_stock,
            extra={"product_id": product_id, "quantity": quantity, "in_stock": product.in_stock},
        )
        raise InsufficientStockError(product_id, quantity, product.in_stock)

    sale = Sale(
        product_id=product.id,
        quantity=quantity,
        unit_price=to_money(unit_price),
        buyer_company=buyer_company,
        sale_date=sale_date,
    )
    db.add(sale)
    product.in_stock -= quantity
    commit_changes(db, "Product", product_id)

    logger.info(
        "Sale %s recorded: %s x product %s to %s; stock now %s.",
        sale.id,
        quantity,
        product_id,
        buyer_company,
        product.in_stock,
        extra={"sale_id": sale.id, "product_id": product_id, "in_stock": product.in_stock},
    )
    return sale


def update_price(
    db: Session,
    product_id: int,
    new_netto_price,
    *,
    expected_version: Optional[int] = None,
) -> Product:
    product = load_product(db, product_id)
    ensure_version(product, expected_version)

    old_price = product.netto_price
    product.netto_price = to_money(new_netto_price)
    commit_changes(db, "Product", product_id)

    logger.info(
        "Product %s netto price changed from %s to %s.",
        product_id,
        old_price,
        product.netto_price,
        extra={"product_id": product_id},
    )
    return product


__all__ = [
    "create_purchase",
    "delete_purchase",
    "deliver_purchase",
    "record_sale",
    "update_price",
]
