import argparse
from decimal import Decimal

from sqlalchemy import delete, select

from app.core.logging import setup_logging
from app.database import Base, SessionLocal, engine
from app.models import Product, Purchase, Sale

SAMPLE_PRODUCTS = (
    dict(
        name="Harbor Lighthouse",
        description="Modular lighthouse with rotating lamp, 1,240 pieces.",
        netto_price=Decimal("89.90"),
        category="Architecture",
        image_link=None,
    ),
    dict(
        name="Steam Locomotive BR 01",
        description="Detailed steam engine with tender, compatible with standard track.",
        netto_price=Decimal("149.00"),
        category="Trains",
    ),
    dict(
        name="Space Shuttle Explorer",
        description="Shuttle with opening cargo bay and satellite.",
        netto_price=Decimal("54.50"),
        category="Space",
    ),
    dict(
        name="Medieval Market Stall",
        description="Small market scene with two figures and accessories.",
        netto_price=Decimal("19.99"),
        category="Castle",
    ),
)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed a sample building-block catalog.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing products, purchases and sales before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Sale))
            db.execute(delete(Purchase))
            db.execute(delete(Product))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            print("Seed skipped: products already exist.")
            return

        db.add_all(Product(in_stock=0, **values) for values in SAMPLE_PRODUCTS)
        db.commit()
        print("Seed data created: {} products.".format(len(SAMPLE_PRODUCTS)))
    finally:
        db.close()


if __name__ == "__main__":
    main()
