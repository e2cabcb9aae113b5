from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Index, Integer, Numeric, String

from app.core.constants import BUYER_COMPANY_MAX_LENGTH
from app.database.base import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    buyer_company = Column(String(BUYER_COMPANY_MAX_LENGTH), nullable=False)
    sale_date = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sales_quantity_positive"),
        Index("idx_sales_product_date", "product_id", "sale_date"),
    )


__all__ = ["Sale"]
