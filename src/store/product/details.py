"""Product details management — command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.product.product import SEO, Product
from store.shared.text import load_list

_SCALAR_FIELDS = (
    "name",
    "description",
    "price",
    "compare_at_price",
    "category",
    "in_stock",
    "stock_quantity",
    "low_stock_threshold",
    "featured",
)


@store.command(part_of="Product")
class UpdateProductDetails:
    """Partial update. Fields left as None are not changed."""

    product_id: Identifier(required=True)
    name: String(max_length=200)
    description: Text()
    price: Float(min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    category: String(max_length=10)
    sizes: Text()
    colors: Text()
    tags: Text()
    image_urls: Text()  # JSON: newly uploaded images, appended
    in_stock: Boolean()
    stock_quantity: Integer(min_value=0)
    low_stock_threshold: Integer(min_value=0)
    featured: Boolean()
    meta_title: String(max_length=70)
    meta_description: String(max_length=160)


@store.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProductDetails)
    def update_details(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {f: getattr(command, f) for f in _SCALAR_FIELDS if getattr(command, f) is not None}
        for list_field in ("sizes", "colors", "tags"):
            raw = getattr(command, list_field)
            if raw is not None:
                changes[list_field] = load_list(raw)

        if command.meta_title is not None or command.meta_description is not None:
            current = product.seo
            changes["seo"] = SEO(
                meta_title=command.meta_title if command.meta_title is not None else (current and current.meta_title),
                meta_description=(
                    command.meta_description
                    if command.meta_description is not None
                    else (current and current.meta_description)
                ),
            )

        product.update_details(**changes)
        for url in load_list(command.image_urls):
            product.add_image(url=url)

        repo.add(product)
