"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from zencafe.domain import zencafe


@zencafe.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the menu."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
