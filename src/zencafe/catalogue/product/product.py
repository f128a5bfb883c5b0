"""Product aggregate: an item on the cafe's menu."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from zencafe.catalogue.product.events import ProductCreated, ProductUpdated
from zencafe.domain import zencafe
from zencafe.shared.money import AMOUNT_PATTERN, parse_amount
from zencafe.shared.slug import slugify


@zencafe.aggregate
class Product:
    """A coffee, tea or pastry offered in the storefront.

    Prices are decimal strings with at most two fraction digits. The slug is
    derived from the name unless one is given explicitly.
    """

    category_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    slug: String(required=True, max_length=220, unique=True)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    image_url: String(required=True, max_length=500)
    origin: String(max_length=200)
    brewing_suggestions: Text()
    in_stock: Boolean(default=True)
    featured: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def price_must_be_a_decimal_amount(self):
        if self.price is not None and not AMOUNT_PATTERN.match(str(self.price)):
            raise ValidationError({"price": [f"Invalid amount: {self.price!r}"]})

    @classmethod
    def create(
        cls,
        category_id,
        name,
        description,
        price,
        image_url,
        slug=None,
        origin=None,
        brewing_suggestions=None,
        in_stock=True,
        featured=False,
    ):
        parse_amount(price, "price")
        now = datetime.now(UTC)
        product = cls(
            category_id=category_id,
            name=name,
            slug=slug or slugify(name),
            description=description,
            price=price,
            image_url=image_url,
            origin=origin,
            brewing_suggestions=brewing_suggestions,
            in_stock=True if in_stock is None else in_stock,
            featured=bool(featured),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                category_id=category_id,
                name=product.name,
                slug=product.slug,
                price=product.price,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update.

        A rename regenerates the slug unless `slug` is part of the same update.
        """
        changes = {field: value for field, value in changes.items() if value is not None}
        if "price" in changes:
            parse_amount(changes["price"], "price")
        if "name" in changes and "slug" not in changes:
            changes["slug"] = slugify(changes["name"])

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                slug=self.slug,
                price=self.price,
                in_stock=self.in_stock,
                featured=self.featured,
            )
        )


@zencafe.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        return self._dao.query.filter(slug=slug).all().first

    def find_by_ids(self, product_ids) -> dict[str, Product]:
        if not product_ids:
            return {}
        products = self._dao.query.filter(id__in=list(product_ids)).all().items
        return {str(product.id): product for product in products}

    def list_in_category(self, category_id=None) -> list[Product]:
        query = self._dao.query
        if category_id is not None:
            query = query.filter(category_id=category_id)
        return query.all().items

    def remove(self, product: Product) -> None:
        self._dao.delete(product)
