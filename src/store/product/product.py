"""Product aggregate root with the Image entity and SEO value object."""

from datetime import datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Integer, String, Text, ValueObject

from store.domain import store
from store.product.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductImageAdded,
    ProductImageRemoved,
    ProductRated,
    ProductRemoved,
    StockDecremented,
    StockDepleted,
)
from store.shared.text import dump_list, load_list, slugify

MAX_IMAGES = 10


class ProductCategory(Enum):
    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"


class ProductSize(Enum):
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"


_SIZES = {size.value for size in ProductSize}


@store.value_object(part_of="Product")
class SEO:
    """Search engine metadata for a product page."""

    meta_title: String(max_length=70)
    meta_description: String(max_length=160)


@store.entity(part_of="Product")
class Image:
    """Product image entity."""

    url: String(required=True, max_length=500)
    alt_text: String(max_length=255)
    is_primary: Boolean(default=False)
    display_order: Integer(default=0)


@store.aggregate
class Product:
    """A t-shirt in the catalogue, with its stock level and review rating.

    `sizes`, `colors` and `tags` are stored as JSON arrays. Stock may never go
    negative; the product leaves stock the moment its quantity reaches zero.
    """

    name: String(required=True, max_length=200)
    slug: String(max_length=220)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    category: String(required=True, choices=ProductCategory)
    sizes: Text()
    colors: Text()
    tags: Text()
    images: HasMany(Image)
    in_stock: Boolean(default=True)
    stock_quantity: Integer(default=100, min_value=0)
    low_stock_threshold: Integer(default=10, min_value=0)
    featured: Boolean(default=False)
    rating_average: Float(default=0.0)
    rating_count: Integer(default=0)
    seo: ValueObject(SEO)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def sizes_must_be_known(self):
        unknown = [s for s in self.size_list if s not in _SIZES]
        if unknown:
            raise ValidationError({"sizes": [f"Unknown sizes: {', '.join(unknown)}"]})

    @invariant.post
    def images_cannot_exceed_maximum(self):
        if len(self.images) > MAX_IMAGES:
            raise ValidationError({"images": [f"Cannot have more than {MAX_IMAGES} images"]})

    @invariant.post
    def exactly_one_primary_image_when_images_exist(self):
        if not self.images:
            return
        primaries = [i for i in self.images if i.is_primary]
        if len(primaries) != 1:
            raise ValidationError({"images": ["Exactly one image must be marked as primary"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        sizes=None,
        colors=None,
        tags=None,
        compare_at_price=None,
        stock_quantity=100,
        low_stock_threshold=10,
        featured=False,
        seo=None,
    ):
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": ["Name is required"]})

        now = datetime.now()
        product = cls(
            name=name,
            slug=slugify(name),
            description=description,
            price=price,
            compare_at_price=compare_at_price,
            category=category,
            sizes=dump_list(sizes),
            colors=dump_list(colors),
            tags=dump_list(tags),
            stock_quantity=stock_quantity,
            in_stock=stock_quantity > 0,
            low_stock_threshold=low_stock_threshold,
            featured=featured,
            seo=seo,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                slug=product.slug,
                category=product.category,
                price=product.price,
                stock_quantity=product.stock_quantity,
                created_at=now,
            )
        )
        return product

    @property
    def size_list(self):
        return load_list(self.sizes)

    @property
    def color_list(self):
        return load_list(self.colors)

    @property
    def tag_list(self):
        return load_list(self.tags)

    @property
    def primary_image(self):
        return next((i for i in self.images if i.is_primary), None)

    def is_low_stock(self):
        return 0 < self.stock_quantity <= self.low_stock_threshold

    def can_fulfil(self, quantity):
        return bool(self.in_stock) and self.stock_quantity >= quantity

    def update_details(self, **changes):
        """Apply a partial update. Only keys present in `changes` are touched."""
        if "name" in changes:
            name = (changes.pop("name") or "").strip()
            if not name:
                raise ValidationError({"name": ["Name is required"]})
            self.name = name
            self.slug = slugify(name)

        for list_field in ("sizes", "colors", "tags"):
            if list_field in changes:
                setattr(self, list_field, dump_list(changes.pop(list_field)))

        for field, value in changes.items():
            setattr(self, field, value)

        self.updated_at = datetime.now()
        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                in_stock=self.in_stock,
                stock_quantity=self.stock_quantity,
            )
        )

    def decrement_stock(self, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock_quantity:
            raise ValidationError({"stock_quantity": [f"Product {self.name} is out of stock or insufficient quantity"]})

        previous = self.stock_quantity
        self.stock_quantity = previous - quantity
        self.updated_at = datetime.now()
        self.raise_(
            StockDecremented(
                product_id=self.id,
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.stock_quantity,
            )
        )

        if self.stock_quantity == 0:
            self.in_stock = False
            self.raise_(StockDepleted(product_id=self.id, name=self.name))

    def record_rating(self, rating):
        """Fold an approved review's rating into the running average."""
        total = (self.rating_average or 0.0) * (self.rating_count or 0) + rating
        self.rating_count = (self.rating_count or 0) + 1
        self.rating_average = round(total / self.rating_count, 2)
        self.raise_(
            ProductRated(
                product_id=self.id,
                rating=rating,
                rating_average=self.rating_average,
                rating_count=self.rating_count,
            )
        )

    def add_image(self, url, alt_text=None, is_primary=False):
        with atomic_change(self):
            # First image is always primary
            if not self.images:
                is_primary = True

            if is_primary:
                for img in self.images:
                    if img.is_primary:
                        img.is_primary = False

            image = Image(
                url=url,
                alt_text=alt_text or self.name,
                is_primary=is_primary,
                display_order=len(self.images),
            )
            self.add_images(image)

        self.updated_at = datetime.now()
        self.raise_(
            ProductImageAdded(
                product_id=self.id,
                image_id=image.id,
                url=url,
                is_primary=is_primary,
            )
        )
        return image

    def remove_image(self, image_id):
        image = next((i for i in self.images if str(i.id) == str(image_id)), None)
        if image is None:
            raise ValidationError({"images": [f"Image {image_id} not found"]})

        was_primary = image.is_primary

        with atomic_change(self):
            self.remove_images(image)
            if was_primary and self.images:
                self.images[0].is_primary = True

        self.updated_at = datetime.now()
        self.raise_(ProductImageRemoved(product_id=self.id, image_id=image_id))
        return image

    def mark_removed(self):
        self.raise_(ProductRemoved(product_id=self.id, name=self.name, removed_at=datetime.now()))
