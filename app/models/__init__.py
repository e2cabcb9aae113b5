from app.models.product import Product
from app.models.purchase import Purchase
from app.models.sale import Sale

__all__ = [
    "Product",
    "Purchase",
    "Sale",
]
