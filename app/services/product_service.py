import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.errors import ConflictError, NotFoundError
from app.core.pricing import to_money
from app.models import Product

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "description", "netto_price", "category")
_EDITABLE_FIELDS = _REQUIRED_FIELDS + ("image_link",)


def load_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise NotFoundError("Product", product_id)
    return product


def ensure_version(product: Product, expected_version: Optional[int]) -> None:
    if expected_version is None:
        return
    if product.version != expected_version:
        logger.warning(
            "Stale write on product %s: expected version %s, stored %s.",
            product.id,
            expected_version,
            product.version,
        )
        raise ConflictError("Product", product.id)


def commit_changes(db: Session, entity: str, entity_id) -> None:
    """Commit the unit of work; a stale row version becomes ConflictError."""
    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        logger.warning("Optimistic concurrency conflict on %s %s.", entity, entity_id)
        raise ConflictError(entity, entity_id) from exc
    except SQLAlchemyError:
        db.rollback()
        raise


def create_product(
    db: Session,
    *,
    name: str,
    description: str,
    netto_price,
    category: str,
    image_link: Optional[str] = None,
) -> Product:
    product = Product(
        name=name,
        description=description,
        netto_price=to_money(netto_price),
        category=category,
        image_link=image_link,
        in_stock=0,
    )
    db.add(product)
    commit_changes(db, "Product", None)
    logger.info("Created product %s (%s).", product.id, product.name, extra={"product_id": product.id})
    return product


def update_product(
    db: Session,
    product_id: int,
    changes: Mapping[str, Any],
    *,
    expected_version: Optional[int] = None,
) -> Product:
    """Apply only the keys present in ``changes``; ``image_link`` may be cleared with None."""
    unknown = set(changes) - set(_EDITABLE_FIELDS)
    if unknown:
        raise ValueError("Fields cannot be edited: {}".format(", ".join(sorted(unknown))))
    for field in _REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            raise ValueError("{} cannot be empty.".format(field))

    product = load_product(db, product_id)
    ensure_version(product, expected_version)

    for field, value in changes.items():
        if field == "netto_price":
            value = to_money(value)
        setattr(product, field, value)

    commit_changes(db, "Product", product_id)
    logger.info("Updated product %s.", product_id, extra={"product_id": product_id})
    return product


__all__ = [
    "commit_changes",
    "create_product",
    "ensure_version",
    "load_product",
    "update_product",
]
