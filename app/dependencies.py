import random

from app.core.pricing import get_default_rng
from app.database.session import get_db


def get_price_rng() -> random.Random:
    """Randomness provider for purchase price variance; overridable in tests."""
    return get_default_rng()


__all__ = ["get_db", "get_price_rng"]
