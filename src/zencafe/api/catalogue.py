"""Public catalog endpoints."""

from fastapi import APIRouter

from zencafe.api.schemas import CategoryResponse, ProductResponse
from zencafe.catalogue.category.management import list_categories
from zencafe.catalogue.product.browsing import get_by_slug, list_products

router = APIRouter(prefix="/api", tags=["catalogue"])


@router.get("/products", response_model=list[ProductResponse])
async def get_products(
    category: str | None = None,
    search: str | None = None,
    featured: bool | None = None,
) -> list[ProductResponse]:
    products = list_products(category_slug=category, search=search, featured=featured)
    return [ProductResponse.model_validate(product) for product in products]


@router.get("/products/{slug}", response_model=ProductResponse)
async def get_product(slug: str) -> ProductResponse:
    return ProductResponse.model_validate(get_by_slug(slug))


@router.get("/categories", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(category) for category in list_categories()]
