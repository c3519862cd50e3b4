"""ModerateReview — an administrator approves or rejects a pending review."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from store.domain import store
from store.product.product import Product
from store.review.review import ModerationAction, Review
from store.utils.logging import get_logger

logger = get_logger(__name__)


@store.command(part_of="Review")
class ModerateReview:
    review_id: Identifier(required=True)
    action: String(required=True, max_length=10)


@store.command_handler(part_of=Review)
class ModerateReviewHandler:
    @handle(ModerateReview)
    def moderate_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        if command.action == ModerationAction.APPROVE.value:
            review.approve()

            # The rating only counts once the review is public
            product_repo = current_domain.repository_for(Product)
            product = product_repo.find_by_id(review.product_id)
            if product is not None:
                product.record_rating(review.rating)
                product_repo.add(product)
        elif command.action == ModerationAction.REJECT.value:
            review.reject()
        else:
            raise ValidationError({"action": ["Action must be 'approve' or 'reject'"]})

        repo.add(review)
        logger.info("Review moderated", review_id=str(review.id), status=review.status)
        return review.status
