"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from store.domain import store


@store.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    stock_quantity: Integer(required=True)
    created_at: DateTime(required=True)


@store.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    in_stock: Boolean(default=False)
    stock_quantity: Integer(required=True)


@store.event(part_of="Product")
class ProductImageAdded:
    __version__ = 1

    product_id: Identifier(required=True)
    image_id: Identifier(required=True)
    url: String(required=True)
    is_primary: Boolean(default=False)


@store.event(part_of="Product")
class ProductImageRemoved:
    __version__ = 1

    product_id: Identifier(required=True)
    image_id: Identifier(required=True)


@store.event(part_of="Product")
class StockDecremented:
    """Units were taken from stock by a placed order."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@store.event(part_of="Product")
class StockDepleted:
    """Stock reached zero and the product is now out of stock."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)


@store.event(part_of="Product")
class ProductRated:
    __version__ = 1

    product_id: Identifier(required=True)
    rating: Integer(required=True)
    rating_average: Float(required=True)
    rating_count: Integer(required=True)


@store.event(part_of="Product")
class ProductRemoved:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    removed_at: DateTime(required=True)
