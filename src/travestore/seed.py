"""Development seed utility.

Replaces the whole ``products`` collection with a JSON fixture:

    python -m travestore.seed                 # packaged data/products.json
    python -m travestore.seed my-fixture.json

Destructive and not idempotent: every run deletes all products and inserts
the fixture again under fresh ObjectIds.
"""

import asyncio
import json
import sys
from pathlib import Path

from motor.motor_asyncio import AsyncIOMotorDatabase

from travestore.db.client import get_db, shutdown
from travestore.logging import get_logger
from travestore.models import ProductDocument
from travestore.repositories.product import replace_all_products

logger = get_logger(__name__)

DEFAULT_FIXTURE = Path(__file__).parent / "data" / "products.json"


def load_fixture(path: Path) -> list[ProductDocument]:
    """Read a JSON array of products and validate each entry.

    Raises pydantic.ValidationError on the first malformed record, before
    anything in the database is touched.
    """
    records = json.loads(path.read_text(encoding="utf-8"))
    return [ProductDocument.new(record) for record in records]


async def seed_products(db: AsyncIOMotorDatabase, fixture: Path = DEFAULT_FIXTURE) -> int:
    """Clear the products collection and insert the fixture. Returns the inserted count."""
    products = load_fixture(fixture)
    inserted = await replace_all_products(db, products)
    logger.info("products_seeded", count=inserted, fixture=str(fixture))
    return inserted


async def _run(fixture: Path) -> None:
    try:
        await seed_products(get_db(), fixture)
    finally:
        shutdown()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    fixture = Path(args[0]) if args else DEFAULT_FIXTURE
    try:
        asyncio.run(_run(fixture))
    except Exception:
        logger.exception("seed_failed", fixture=str(fixture))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
