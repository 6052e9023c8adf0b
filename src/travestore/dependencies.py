"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from travestore.db.client import get_db

DB = Annotated[AsyncIOMotorDatabase, Depends(get_db)]
