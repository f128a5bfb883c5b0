"""Domain events for the Product aggregate."""

from protean.fields import Boolean, Identifier, String

from zencafe.domain import zencafe


@zencafe.event(part_of="Product")
class ProductCreated:
    """A product was added to the menu."""

    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    price: String(required=True)


@zencafe.event(part_of="Product")
class ProductUpdated:
    """Details of a product changed. Carries the state after the change."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    price: String(required=True)
    in_stock: Boolean()
    featured: Boolean()

