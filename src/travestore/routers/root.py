"""Welcome endpoint."""

from fastapi import APIRouter

from travestore.config import settings

router = APIRouter()


@router.get("/", include_in_schema=False)
async def welcome() -> dict[str, object]:
    """Static landing payload pointing at the docs and the product routes."""
    return {
        "message": "Welcome to TraveStore API",
        "documentation": f"http://localhost:{settings.port}/api-docs",
        "endpoints": {
            "GET /api/products": "Get all products",
            "GET /api/products/:id": "Get product by ID",
            "GET /api/products?category=Apparel": "Filter products by category",
            "POST /api/products": "Create new product",
        },
    }
