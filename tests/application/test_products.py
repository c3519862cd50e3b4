"""Application tests for catalogue commands and queries."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from store.product.creation import CreateProduct
from store.product.details import UpdateProductDetails
from store.product.images import AddProductImage, RemoveProductImage
from store.product.product import Product
from store.product.removal import RemoveProduct


class TestCreateProduct:
    def test_persists_lists_and_images(self, create_product):
        product_id = create_product(image_urls=json.dumps(["/uploads/1.png", "/uploads/2.png"]))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.size_list == ["S", "M", "L"]
        assert len(product.images) == 2
        assert product.primary_image.url == "/uploads/1.png"

    def test_stock_defaults_when_not_supplied(self):
        product_id = current_domain.process(
            CreateProduct(name="Plain Tee", description="Plain", price=9.99, category="unisex"),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.stock_quantity == 100
        assert product.low_stock_threshold == 10
        assert product.featured is False


class TestUpdateProduct:
    def test_only_supplied_fields_change(self, create_product):
        product_id = create_product(price=19.99)

        current_domain.process(
            UpdateProductDetails(product_id=product_id, featured=True, tags=json.dumps(["summer"])),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.featured is True
        assert product.tag_list == ["summer"]
        assert product.price == 19.99
        assert product.name == "Classic Tee"

    def test_uploaded_images_are_appended(self, create_product):
        product_id = create_product(image_urls=json.dumps(["/uploads/1.png"]))

        current_domain.process(
            UpdateProductDetails(product_id=product_id, image_urls=json.dumps(["/uploads/2.png"])),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert [i.url for i in sorted(product.images, key=lambda i: i.display_order)] == [
            "/uploads/1.png",
            "/uploads/2.png",
        ]


class TestImagesAndRemoval:
    def test_add_and_remove_image(self, create_product):
        product_id = create_product()
        image_id = current_domain.process(
            AddProductImage(product_id=product_id, url="/uploads/3.png"), asynchronous=False
        )

        url = current_domain.process(RemoveProductImage(product_id=product_id, image_id=image_id), asynchronous=False)

        assert url == "/uploads/3.png"
        assert current_domain.repository_for(Product).get(product_id).images == []

    def test_remove_product(self, create_product):
        product_id = create_product(image_urls=json.dumps(["/uploads/1.png"]))

        urls = current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)

        assert urls == ["/uploads/1.png"]
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)


class TestSearch:
    def _seed(self, create_product):
        create_product(name="Black Tee", price=10.0, category="men", featured=True)
        create_product(name="White Tee", price=30.0, category="women")
        create_product(name="Grey Hoodie", price=20.0, category="unisex")

    def test_filters(self, create_product):
        self._seed(create_product)
        repo = current_domain.repository_for(Product)

        men, total = repo.search(category="men")
        assert [p.name for p in men] == ["Black Tee"]
        assert total == 1

        everything, total = repo.search(category="all")
        assert total == 3

        featured, _ = repo.search(featured=True)
        assert [p.name for p in featured] == ["Black Tee"]

        tees, _ = repo.search(search="tee")
        assert sorted(p.name for p in tees) == ["Black Tee", "White Tee"]

    def test_sorting_and_pagination(self, create_product):
        self._seed(create_product)
        repo = current_domain.repository_for(Product)

        ascending, _ = repo.search(sort_by="price-asc")
        assert [p.price for p in ascending] == [10.0, 20.0, 30.0]

        descending, _ = repo.search(sort_by="price-desc")
        assert [p.price for p in descending] == [30.0, 20.0, 10.0]

        second_page, total = repo.search(sort_by="price-asc", page=2, limit=2)
        assert [p.price for p in second_page] == [30.0]
        assert total == 3
