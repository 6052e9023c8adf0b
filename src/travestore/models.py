"""Document models.

ProductDocument is the persisted schema of the ``products`` collection.
Everything the application writes goes through it, so malformed documents
fail with a pydantic ValidationError before they reach MongoDB.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ProductDocument(BaseModel):
    """Stored shape: {_id, name, category, price, imageUrl, createdAt, updatedAt}.

    ``_id`` is left to MongoDB, which assigns an ObjectId on insert.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    image_url: str = Field(alias="imageUrl", min_length=1)
    created_at: datetime = Field(alias="createdAt", default_factory=_utcnow)
    updated_at: datetime = Field(alias="updatedAt", default_factory=_utcnow)

    @classmethod
    def new(cls, data: dict[str, Any]) -> "ProductDocument":
        """Validate user data and stamp both timestamps with the same instant."""
        now = _utcnow()
        return cls.model_validate({**data, "createdAt": now, "updatedAt": now})

    def to_mongo(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
