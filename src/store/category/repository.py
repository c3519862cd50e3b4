"""Repository for the Category aggregate."""

from store.category.category import Category
from store.domain import store


@store.repository(part_of=Category)
class CategoryRepository:
    def active(self) -> list[Category]:
        """Active categories in display order."""
        return self._dao.query.filter(is_active=True).order_by("display_order").all().items
