"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from store.domain import store
from store.product.product import Product

# `sort_by` query values mapped to DAO ordering
SORT_ORDERS = {
    "price-asc": "price",
    "price-desc": "-price",
    "newest": "-created_at",
}


@store.repository(part_of=Product)
class ProductRepository:
    def find_by_id(self, product_id) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def search(self, category=None, featured=False, search=None, sort_by=None, page=1, limit=12):
        """Filter, sort and paginate the catalogue.

        Returns `(products, total)` where `total` counts every match across
        all pages.
        """
        query = self._dao.query
        if category and category != "all":
            query = query.filter(category=category)
        if featured:
            query = query.filter(featured=True)
        if search:
            query = query.filter(name__icontains=search)

        total = query.all().total

        page = max(int(page or 1), 1)
        limit = max(int(limit or 12), 1)
        results = (
            query.order_by(SORT_ORDERS.get(sort_by, "-created_at"))
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return results.items, total
