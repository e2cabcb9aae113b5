from app.routers.health import router as health_router
from app.routers.products import router as products_router
from app.routers.purchases import router as purchases_router

__all__ = [
    "health_router",
    "products_router",
    "purchases_router",
]
