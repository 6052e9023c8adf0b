"""Product data-access layer.

Pure query functions: no business logic, no HTTP concerns.
Each function takes the database and returns raw documents or scalars.
"""

import re
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from travestore.db.client import PRODUCTS_COLLECTION
from travestore.models import ProductDocument


def _products(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[PRODUCTS_COLLECTION]


def category_filter(category: str | None) -> dict[str, Any]:
    """Case-insensitive substring match on category; empty filter when no category is given."""
    if not category:
        return {}
    return {"category": {"$regex": re.escape(category), "$options": "i"}}


async def list_products(
    db: AsyncIOMotorDatabase, category: str | None = None
) -> list[dict[str, Any]]:
    """Return every product matching the category filter, in natural order."""
    cursor = _products(db).find(category_filter(category))
    return await cursor.to_list(length=None)


async def get_product(
    db: AsyncIOMotorDatabase, product_id: str | ObjectId
) -> dict[str, Any] | None:
    """Return one product by id, or None.

    A malformed string id raises bson.errors.InvalidId.
    """
    return await _products(db).find_one({"_id": ObjectId(product_id)})


async def insert_product(db: AsyncIOMotorDatabase, product: ProductDocument) -> dict[str, Any]:
    """Insert one product and return the stored document including its new _id."""
    doc = product.to_mongo()
    result = await _products(db).insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


async def replace_all_products(db: AsyncIOMotorDatabase, products: list[ProductDocument]) -> int:
    """Delete every product, then bulk-insert the given ones. Returns the inserted count."""
    collection = _products(db)
    await collection.delete_many({})
    if not products:
        return 0
    result = await collection.insert_many([p.to_mongo() for p in products])
    return len(result.inserted_ids)
