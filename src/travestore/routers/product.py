"""Product endpoints."""

from fastapi import APIRouter, Query

from travestore.dependencies import DB
from travestore.schemas.error import ErrorResponse
from travestore.schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    ProductResponse,
)
from travestore.services.product import create_product, get_product_by_id, get_products

router = APIRouter(prefix="/api/products", tags=["Products"])

_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}


@router.get(
    "",
    response_model=ProductListResponse,
    status_code=200,
    summary="Get all products or filter by category",
    responses=_SERVER_ERROR,
)
async def list_products(
    db: DB,
    category: str | None = Query(
        None,
        description="Filter products by category (case-insensitive substring)",
        examples=["Apparel"],
    ),
) -> ProductListResponse:
    """Retrieve every product, optionally only those whose category contains ``category``."""
    products = await get_products(db, category)
    return ProductListResponse(
        count=len(products),
        products=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    status_code=200,
    summary="Get a product by ID",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid product ID"},
        404: {"model": ErrorResponse, "description": "Product not found"},
        **_SERVER_ERROR,
    },
)
async def get_product(db: DB, product_id: str) -> ProductDetailResponse:
    """Retrieve a single product by its MongoDB ObjectId."""
    product = await get_product_by_id(db, product_id)
    return ProductDetailResponse(product=ProductResponse.model_validate(product))


@router.post(
    "",
    response_model=ProductDetailResponse,
    status_code=201,
    summary="Create a new product",
    responses={
        400: {"model": ErrorResponse, "description": "Validation Error"},
        **_SERVER_ERROR,
    },
)
async def add_product(db: DB, payload: ProductCreate | None = None) -> ProductDetailResponse:
    """Add a product to the catalog. All four fields are required and price must not be negative."""
    product = await create_product(db, payload)
    return ProductDetailResponse(product=ProductResponse.model_validate(product))
