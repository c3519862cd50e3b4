"""Repository for the Order aggregate."""

from store.domain import store
from store.order.order import Order


@store.repository(part_of=Order)
class OrderRepository:
    def all_recent(self) -> list[Order]:
        """Every order, newest first."""
        return self._dao.query.order_by("-order_date").all().items

    def for_user(self, user_id) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-order_date").all().items

    def has_purchased(self, user_id, product_id) -> bool:
        product_id = str(product_id)
        return any(
            str(item.product_id) == product_id for order in self.for_user(user_id) for item in order.items
        )
