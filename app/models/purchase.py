from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.ext.hybrid import hybrid_property

from app.database.base import Base


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    expected_delivery = Column(Date, nullable=False)
    actual_delivery = Column(DateTime(timezone=True))

    version = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_purchases_quantity_positive"),
        Index("idx_purchases_product", "product_id"),
    )

    __mapper_args__ = {"version_id_col": version}

    @hybrid_property
    def delivered(self):
        return self.actual_delivery is not None

    @delivered.expression
    def delivered(cls):
        return cls.actual_delivery.is_not(None)


__all__ = ["Purchase"]
