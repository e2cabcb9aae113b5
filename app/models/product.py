from sqlalchemy import CheckConstraint, Column, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)

    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    netto_price = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False)
    in_stock = Column(Integer, nullable=False, default=0)
    image_link = Column(String)

    version = Column(Integer, nullable=False)

    # Read-only views for the detail page; ledger writes go through product_id.
    purchases = relationship(
        "Purchase",
        order_by="Purchase.expected_delivery",
        viewonly=True,
    )
    sales = relationship(
        "Sale",
        order_by="Sale.sale_date",
        viewonly=True,
    )

    __table_args__ = (
        CheckConstraint("in_stock >= 0", name="ck_products_in_stock_non_negative"),
        Index("idx_products_category", "category"),
        Index("idx_products_name", "name"),
    )

    __mapper_args__ = {"version_id_col": version}


__all__ = ["Product"]
