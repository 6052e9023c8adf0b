"""Product business logic.

Input rules for the catalog live here: identifier format on lookup,
required fields and non-negative price on create. Violations are raised
as AppError subclasses and mapped to HTTP responses in errors.py.
"""

from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from travestore.exceptions import InvalidIdError, NotFoundError, ValidationError
from travestore.logging import get_logger
from travestore.models import ProductDocument
from travestore.repositories.product import get_product, insert_product, list_products
from travestore.schemas.product import ProductCreate

logger = get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, category, price, and image URL are required"
NEGATIVE_PRICE_MESSAGE = "Price cannot be negative"
INVALID_ID_MESSAGE = "Invalid product ID"
NOT_FOUND_MESSAGE = "Product not found"


async def get_products(
    db: AsyncIOMotorDatabase, category: str | None = None
) -> list[dict[str, Any]]:
    """All products, optionally narrowed to categories containing ``category`` (any case)."""
    return await list_products(db, category)


async def get_product_by_id(db: AsyncIOMotorDatabase, product_id: str) -> dict[str, Any]:
    if not ObjectId.is_valid(product_id):
        raise InvalidIdError(INVALID_ID_MESSAGE)

    product = await get_product(db, product_id)
    if product is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return product


def _is_missing(value: object) -> bool:
    return value is None or value == ""


async def create_product(db: AsyncIOMotorDatabase, payload: ProductCreate | None) -> dict[str, Any]:
    """Validate a create payload and persist it as a new product.

    Any of name, category, price or imageUrl absent (or an empty string)
    fails with one combined message. A price of 0 is accepted.
    """
    payload = payload or ProductCreate()
    fields = (payload.name, payload.category, payload.price, payload.image_url)
    if any(_is_missing(value) for value in fields):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    if payload.price < 0:  # type: ignore[operator]
        raise ValidationError(NEGATIVE_PRICE_MESSAGE)

    document = ProductDocument.new(payload.model_dump(by_alias=True))
    product = await insert_product(db, document)

    logger.info(
        "product_created",
        product_id=str(product["_id"]),
        name=document.name,
        category=document.category,
        price=document.price,
    )
    return product
