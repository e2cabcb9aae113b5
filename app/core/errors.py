"""
Domain errors raised by the stock ledger and catalog services.

Services raise these unchanged; the HTTP layer decides how to present them.
"""


class LedgerError(Exception):
    """Base class for every ledger/catalog domain error"""


class NotFoundError(LedgerError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__("{} {} not found.".format(entity, entity_id))


class InsufficientStockError(LedgerError):
    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            "Not enough stock for product {}: requested {}, available {}.".format(
                product_id, requested, available
            )
        )


class ConflictError(LedgerError):
    """Raised when a row changed between read and write (stale version)"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            "{} {} was modified or removed by another request.".format(entity, entity_id)
        )


__all__ = [
    "ConflictError",
    "InsufficientStockError",
    "LedgerError",
    "NotFoundError",
]
