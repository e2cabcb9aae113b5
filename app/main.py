import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from app.config import Settings, get_settings
from app.core.logging import setup_logging
from app.database import Base, engine
from app import models  # noqa: F401  registers tables on Base.metadata
from app.routers import health_router, products_router, purchases_router

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("%s started (%s).", settings.APP_NAME, settings.ENVIRONMENT)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(health_router)
app.include_router(products_router)
app.include_router(purchases_router)


@app.get("/")
def root():
    return RedirectResponse(url="/products", status_code=302)


__all__ = ["app", "root"]
