"""Reusable seed data fixtures for integration tests."""

import pytest_asyncio
from motor.motor_asyncio import AsyncIOMotorDatabase

from travestore.repositories.product import replace_all_products
from tests.factories import make_product


@pytest_asyncio.fixture
async def seeded_db(db: AsyncIOMotorDatabase) -> AsyncIOMotorDatabase:
    """Seed 4 products across Apparel, APPAREL GEAR, Footwear and Camping Gear."""
    await replace_all_products(
        db,
        [
            make_product(name="Hiking Shirt", category="Apparel", price=35.0),
            make_product(name="Gaiters", category="APPAREL GEAR", price=42.5),
            make_product(name="Trail Runners", category="Footwear", price=110.0),
            make_product(name="Carabiner", category="Camping Gear", price=25.0),
        ],
    )
    return db
