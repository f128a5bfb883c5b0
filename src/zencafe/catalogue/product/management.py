"""Product management: admin commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from zencafe.catalogue.category.category import Category
from zencafe.catalogue.product.product import Product
from zencafe.domain import zencafe
from zencafe.shared.slug import slugify
from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


@zencafe.command(part_of="Product")
class CreateProduct:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    slug: String(max_length=220)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    image_url: String(required=True, max_length=500)
    origin: String(max_length=200)
    brewing_suggestions: Text()
    in_stock: Boolean(default=True)
    featured: Boolean(default=False)


@zencafe.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    category_id: Identifier()
    name: String(max_length=200)
    slug: String(max_length=220)
    description: Text()
    price: String(max_length=20)
    image_url: String(max_length=500)
    origin: String(max_length=200)
    brewing_suggestions: Text()
    in_stock: Boolean()
    featured: Boolean()


@zencafe.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _ensure_category_exists(category_id):
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Unknown category: {category_id}"]}) from None


def _ensure_slug_available(slug, product_id=None):
    existing = current_domain.repository_for(Product).find_by_slug(slug)
    if existing is not None and str(existing.id) != str(product_id):
        raise ValidationError({"slug": [f"Slug '{slug}' is already in use"]})


@zencafe.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        _ensure_category_exists(command.category_id)
        slug = command.slug or slugify(command.name)
        _ensure_slug_available(slug)

        product = Product.create(
            category_id=command.category_id,
            name=command.name,
            slug=slug,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            origin=command.origin,
            brewing_suggestions=command.brewing_suggestions,
            in_stock=command.in_stock,
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), slug=product.slug)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if command.category_id is not None:
            _ensure_category_exists(command.category_id)

        if command.slug is not None:
            _ensure_slug_available(command.slug, product.id)
        elif command.name is not None:
            _ensure_slug_available(slugify(command.name), product.id)

        product.update_details(
            category_id=command.category_id,
            name=command.name,
            slug=command.slug,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
            origin=command.origin,
            brewing_suggestions=command.brewing_suggestions,
            in_stock=command.in_stock,
            featured=command.featured,
        )
        repo.add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo.remove(product)
        logger.info("Product deleted", product_id=str(command.product_id))
