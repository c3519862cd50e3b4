"""Product creation — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.product.product import SEO, Product
from store.shared.text import load_list
from store.utils.logging import get_logger

logger = get_logger(__name__)


@store.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=200)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    category: String(required=True, max_length=10)
    sizes: Text()  # JSON: list of size codes
    colors: Text()  # JSON: list of colour names
    tags: Text()  # JSON: list of tags
    image_urls: Text()  # JSON: list of stored image URLs
    stock_quantity: Integer(default=100, min_value=0)
    low_stock_threshold: Integer(default=10, min_value=0)
    featured: Boolean(default=False)
    meta_title: String(max_length=70)
    meta_description: String(max_length=160)


@store.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        seo = None
        if command.meta_title or command.meta_description:
            seo = SEO(meta_title=command.meta_title, meta_description=command.meta_description)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            compare_at_price=command.compare_at_price,
            category=command.category,
            sizes=load_list(command.sizes),
            colors=load_list(command.colors),
            tags=load_list(command.tags),
            stock_quantity=command.stock_quantity,
            low_stock_threshold=command.low_stock_threshold,
            featured=command.featured,
            seo=seo,
        )
        for url in load_list(command.image_urls):
            product.add_image(url=url)

        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), name=product.name)
        return str(product.id)
