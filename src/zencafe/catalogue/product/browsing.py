"""Read side of the catalog: storefront listings and lookups."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from zencafe.catalogue.category.category import Category
from zencafe.catalogue.product.product import Product


def _matches(product: Product, term: str) -> bool:
    return term in (product.name or "").lower() or term in (product.description or "").lower()


def list_products(category_slug: str | None = None, search: str | None = None, featured: bool | None = None):
    """Products for the storefront, featured first and then newest first.

    An unknown `category_slug` yields an empty list. `search` is a
    case-insensitive substring match on name or description.
    """
    category_id = None
    if category_slug:
        category = current_domain.repository_for(Category).find_by_slug(category_slug)
        if category is None:
            return []
        category_id = category.id

    products = current_domain.repository_for(Product).list_in_category(category_id)

    if featured is not None:
        products = [p for p in products if bool(p.featured) == featured]

    if search:
        term = search.strip().lower()
        products = [p for p in products if _matches(p, term)]

    return sorted(products, key=lambda p: (bool(p.featured), p.created_at), reverse=True)


def get_by_slug(slug: str) -> Product:
    product = current_domain.repository_for(Product).find_by_slug(slug)
    if product is None:
        raise ObjectNotFoundError(f"Product with slug `{slug}` does not exist")
    return product
