from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from travestore.db.client import ping, shutdown
from travestore.errors import register_error_handlers
from travestore.logging import get_logger
from travestore.middleware import RequestIDMiddleware
from travestore.routers import product, root

logger = get_logger(__name__)

API_TITLE = "TraveStore Swagger API Documentation"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager: code before yield runs on startup, after yield on shutdown.

    Startup: ping MongoDB. A failed ping is logged, not fatal; requests will
    surface the connection error until the server comes back.
    Shutdown: close the client's pooled connections.
    """
    try:
        await ping()
        logger.info("mongodb_connected")
    except PyMongoError as exc:
        logger.error("mongodb_connection_error", error=str(exc))
    yield
    shutdown()


app = FastAPI(
    title=API_TITLE,
    version="1.0.0",
    description="Swagger documentation for travel_store",
    docs_url="/api-docs",
    redoc_url=None,
    swagger_ui_parameters={"displayRequestDuration": True, "filter": True},
    lifespan=lifespan,
)
app.add_middleware(RequestIDMiddleware)
register_error_handlers(app)

app.include_router(root.router)
app.include_router(product.router)
