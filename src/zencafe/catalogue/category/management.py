"""Category management: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from zencafe.catalogue.category.category import Category
from zencafe.domain import zencafe
from zencafe.shared.slug import slugify


@zencafe.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(max_length=120)
    description: Text()
    image_url: String(max_length=500)
    display_order: Integer(default=0)


@zencafe.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)

        slug = command.slug or slugify(command.name)
        if repo.find_by_name(command.name) is not None:
            raise ValidationError({"name": [f"Category '{command.name}' already exists"]})
        if repo.find_by_slug(slug) is not None:
            raise ValidationError({"slug": [f"Slug '{slug}' is already in use"]})

        category = Category.create(
            name=command.name,
            slug=slug,
            description=command.description,
            image_url=command.image_url,
            display_order=command.display_order,
        )
        repo.add(category)
        return str(category.id)


def list_categories() -> list[Category]:
    """All categories ordered by display order, then name."""
    return current_domain.repository_for(Category).list_ordered()
