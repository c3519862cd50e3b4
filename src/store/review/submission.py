"""SubmitReview — a user reviews a product.

One review per user per product. The review is flagged as verified when the
user has an order containing the product.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from store.domain import store
from store.order.order import Order
from store.product.product import Product
from store.review.review import Review
from store.user.user import User


@store.command(part_of="Review")
class SubmitReview:
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String(max_length=200)
    body: Text(required=True)


@store.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        if current_domain.repository_for(Product).find_by_id(command.product_id) is None:
            raise ValidationError({"product_id": [f"Product {command.product_id} not found"]})

        repo = current_domain.repository_for(Review)
        if repo.find_for_user_and_product(command.user_id, command.product_id) is not None:
            raise ValidationError({"review": ["You have already reviewed this product"]})

        user = current_domain.repository_for(User).get(command.user_id)
        verified = current_domain.repository_for(Order).has_purchased(command.user_id, command.product_id)

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            username=user.username,
            rating=command.rating,
            title=command.title,
            body=command.body,
            verified=verified,
        )
        repo.add(review)
        return str(review.id)
