"""Application tests for review submission, moderation and voting."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from store.order.placement import PlaceOrder
from store.product.product import Product
from store.review.moderation import ModerateReview
from store.review.review import Review
from store.review.submission import SubmitReview
from store.review.voting import VoteOnReview


def _submit(product_id, user_id, rating=5):
    return current_domain.process(
        SubmitReview(product_id=product_id, user_id=user_id, rating=rating, title="Love it", body="Great shirt."),
        asynchronous=False,
    )


def _moderate(review_id, action):
    return current_domain.process(ModerateReview(review_id=review_id, action=action), asynchronous=False)


class TestSubmission:
    def test_copies_username(self, create_user, create_product):
        user_id = create_user(username="jane")
        product_id = create_product()

        review = current_domain.repository_for(Review).get(_submit(product_id, user_id))

        assert review.username == "jane"
        assert review.status == "pending"
        assert review.verified is False

    def test_verified_after_purchase(self, create_user, create_product):
        user_id = create_user()
        product_id = create_product(price=10.0)
        current_domain.process(
            PlaceOrder(
                user_id=user_id,
                items=json.dumps([{"product_id": product_id, "quantity": 1, "size": "M", "color": "Black"}]),
                total_amount=10.0,
                shipping_address=json.dumps(
                    {
                        "first_name": "Jane",
                        "last_name": "Doe",
                        "address": "1 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "postal_code": "62701",
                        "country": "US",
                        "phone": "+15550123",
                    }
                ),
                payment_method="paypal",
            ),
            asynchronous=False,
        )

        review = current_domain.repository_for(Review).get(_submit(product_id, user_id))

        assert review.verified is True

    def test_one_review_per_user_and_product(self, create_user, create_product):
        user_id = create_user()
        product_id = create_product()
        _submit(product_id, user_id)

        with pytest.raises(ValidationError):
            _submit(product_id, user_id)

    def test_unknown_product(self, create_user):
        with pytest.raises(ValidationError):
            _submit("missing", create_user())


class TestModeration:
    def test_approval_updates_product_rating(self, create_user, create_product):
        product_id = create_product()
        first = _submit(product_id, create_user(username="jane"), rating=5)
        second = _submit(product_id, create_user(username="joe"), rating=2)

        _moderate(first, "approve")
        _moderate(second, "approve")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.rating_count == 2
        assert product.rating_average == 3.5

    def test_rejection_leaves_rating_alone(self, create_user, create_product):
        product_id = create_product()
        review_id = _submit(product_id, create_user())

        assert _moderate(review_id, "reject") == "rejected"

        product = current_domain.repository_for(Product).get(product_id)
        assert product.rating_count == 0

    def test_unknown_action(self, create_user, create_product):
        review_id = _submit(create_product(), create_user())

        with pytest.raises(ValidationError):
            _moderate(review_id, "publish")

    def test_only_approved_reviews_are_listed(self, create_user, create_product):
        product_id = create_product()
        approved = _submit(product_id, create_user(username="jane"))
        _submit(product_id, create_user(username="joe"))
        _moderate(approved, "approve")

        repo = current_domain.repository_for(Review)
        assert [r.id for r in repo.approved_for_product(product_id)] == [approved]
        assert len(repo.by_status("pending")) == 1
        assert len(repo.by_status()) == 2


class TestVoting:
    def test_vote_once(self, create_user, create_product):
        review_id = _submit(create_product(), create_user(username="jane"))
        voter = create_user(username="joe")

        current_domain.process(VoteOnReview(review_id=review_id, user_id=voter, helpful=True), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(VoteOnReview(review_id=review_id, user_id=voter, helpful=False), asynchronous=False)

        review = current_domain.repository_for(Review).get(review_id)
        assert review.helpful_yes == 1
        assert review.helpful_no == 0
