"""Repository for the Review aggregate."""

from store.domain import store
from store.review.review import Review, ReviewStatus


@store.repository(part_of=Review)
class ReviewRepository:
    def find_for_user_and_product(self, user_id, product_id) -> Review | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def approved_for_product(self, product_id) -> list[Review]:
        return (
            self._dao.query.filter(product_id=str(product_id), status=ReviewStatus.APPROVED.value)
            .order_by("-created_at")
            .all()
            .items
        )

    def by_status(self, status=None) -> list[Review]:
        query = self._dao.query
        if status:
            query = query.filter(status=status)
        return query.order_by("-created_at").all().items
