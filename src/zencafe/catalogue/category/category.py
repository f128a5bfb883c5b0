"""Category aggregate grouping products for browsing."""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String, Text

from zencafe.catalogue.category.events import CategoryCreated
from zencafe.domain import zencafe
from zencafe.shared.slug import slugify


@zencafe.aggregate
class Category:
    """A named shelf of the menu (Coffee, Tea, Pastries).

    Categories are listed by `display_order`, then by name.
    """

    name: String(required=True, max_length=100, unique=True)
    slug: String(required=True, max_length=120, unique=True)
    description: Text()
    image_url: String(max_length=500)
    display_order: Integer(default=0)
    created_at: DateTime()

    @classmethod
    def create(cls, name, slug=None, description=None, image_url=None, display_order=0):
        category = cls(
            name=name,
            slug=slug or slugify(name),
            description=description,
            image_url=image_url,
            display_order=display_order or 0,
            created_at=datetime.now(UTC),
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                slug=category.slug,
            )
        )
        return category


@zencafe.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        return self._dao.query.filter(slug=slug).all().first

    def find_by_name(self, name: str) -> Category | None:
        return self._dao.query.filter(name=name).all().first

    def list_ordered(self) -> list[Category]:
        categories = self._dao.query.all().items
        return sorted(categories, key=lambda c: (c.display_order or 0, c.name))
