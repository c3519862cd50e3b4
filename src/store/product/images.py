"""Image management — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from store.domain import store
from store.product.product import Product


@store.command(part_of="Product")
class AddProductImage:
    product_id: Identifier(required=True)
    url: String(required=True, max_length=500)
    alt_text: String(max_length=255)
    is_primary: Boolean(default=False)


@store.command(part_of="Product")
class RemoveProductImage:
    product_id: Identifier(required=True)
    image_id: Identifier(required=True)


@store.command_handler(part_of=Product)
class ManageImagesHandler:
    @handle(AddProductImage)
    def add_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image = product.add_image(
            url=command.url,
            alt_text=command.alt_text,
            is_primary=bool(command.is_primary),
        )
        repo.add(product)
        return str(image.id)

    @handle(RemoveProductImage)
    def remove_image(self, command):
        """Detach the image and return its URL so the caller can delete the file."""
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image = product.remove_image(command.image_id)
        repo.add(product)
        return image.url
