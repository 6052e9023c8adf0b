from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from travestore.config import settings

PRODUCTS_COLLECTION = "products"

# Process-wide Motor client.
# Motor connects lazily and pools connections internally, so creating it at import
# time is free; the first query (or the startup ping) opens the sockets.
# tz_aware=True returns stored datetimes as UTC-aware values instead of naive ones.
client: AsyncIOMotorClient = AsyncIOMotorClient(
    settings.mongodb_uri,
    serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    tz_aware=True,
)


def get_db() -> AsyncIOMotorDatabase:
    """FastAPI dependency that provides the application database.

    The database named in MONGODB_URI wins; MONGODB_DEFAULT_DB is the fallback
    when the connection string has no path component.

    Usage in endpoints:
        @router.get("/products")
        async def products(db: AsyncIOMotorDatabase = Depends(get_db)):
            return await db.products.find().to_list(None)
    """
    return client.get_default_database(settings.mongodb_default_db)


async def ping() -> None:
    """Round-trip to the server. Raises if no server is reachable within the selection timeout."""
    await client.admin.command("ping")


def shutdown() -> None:
    """Graceful shutdown: close all pooled connections.

    Call this in FastAPI's lifespan context manager on shutdown.
    """
    client.close()
