"""Product removal — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from store.domain import store
from store.product.product import Product
from store.utils.logging import get_logger

logger = get_logger(__name__)


@store.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@store.command_handler(part_of=Product)
class RemoveProductHandler:
    @handle(RemoveProduct)
    def remove_product(self, command):
        """Delete the product. Returns the URLs of the images it carried."""
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image_urls = [image.url for image in product.images]

        product.mark_removed()
        repo._dao.delete(product)
        logger.info("Product removed", product_id=str(product.id), name=product.name)
        return image_urls
