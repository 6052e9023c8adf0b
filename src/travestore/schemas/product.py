"""Product request and response schemas.

Wire names follow the stored document (``_id``, ``imageUrl``, ``createdAt``);
Python code uses snake_case and FastAPI serializes by alias.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# ObjectId on the way in, 24-char hex string on the way out.
ObjectIdStr = Annotated[str, BeforeValidator(str)]


class ProductCreate(BaseModel):
    """POST /api/products body.

    Every field is optional at the schema level. The service decides which
    missing fields are an error and answers with a single catalog message.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Hiking Boots",
                    "category": "Apparel",
                    "price": 150.00,
                    "imageUrl": "https://example.com/images/hiking-boots.jpg",
                }
            ]
        },
    )

    name: str | None = Field(default=None, description="The product name")
    category: str | None = Field(default=None, description="The product category")
    price: float | None = Field(
        default=None, allow_inf_nan=False, description="The product price in USD"
    )
    image_url: str | None = Field(
        default=None, alias="imageUrl", description="URL to the product image"
    )


class ProductResponse(BaseModel):
    """A stored product."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id", examples=["676063ba23e59f11d4567890"])
    name: str = Field(examples=["Carabiner"])
    category: str = Field(examples=["Camping Gear"])
    price: float = Field(ge=0, examples=[25.00])
    image_url: str = Field(alias="imageUrl", examples=["https://example.com/images/carabiner.jpg"])
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ProductListResponse(BaseModel):
    """All products matching the optional category filter."""

    success: bool = True
    count: int
    products: list[ProductResponse]


class ProductDetailResponse(BaseModel):
    """A single product, returned by lookup and create."""

    success: bool = True
    product: ProductResponse
