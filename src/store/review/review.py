"""Review aggregate.

State machine:
    pending → approved | rejected

Only approved reviews are shown on a product page, and only approval feeds the
product's rating.
"""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, Integer, String, Text

from store.domain import store
from store.review.events import HelpfulVoteRecorded, ReviewApproved, ReviewRejected, ReviewSubmitted


class ReviewStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ModerationAction(Enum):
    APPROVE = "approve"
    REJECT = "reject"


@store.entity(part_of="Review")
class HelpfulVote:
    """One user's answer to "was this review helpful?"."""

    user_id: Identifier(required=True)
    helpful: Boolean(default=False)
    voted_at: DateTime(required=True)


@store.aggregate
class Review:
    """A user's rating and write-up of a product."""

    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    username: String(required=True, max_length=50)
    rating: Integer(required=True)
    title: String(max_length=200)
    body: Text(required=True)
    verified: Boolean(default=False)
    status: String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    votes: HasMany(HelpfulVote)
    helpful_yes: Integer(default=0)
    helpful_no: Integer(default=0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not 1 <= self.rating <= 5:
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    @invariant.post
    def body_must_not_be_empty(self):
        if self.body is not None and not self.body.strip():
            raise ValidationError({"body": ["Review text cannot be empty"]})

    @classmethod
    def submit(cls, product_id, user_id, username, rating, body, title=None, verified=False):
        now = datetime.now()
        review = cls(
            product_id=product_id,
            user_id=user_id,
            username=username,
            rating=rating,
            title=title,
            body=body,
            verified=verified,
            status=ReviewStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                user_id=user_id,
                rating=rating,
                verified=verified,
                submitted_at=now,
            )
        )
        return review

    def _assert_pending(self):
        if self.status != ReviewStatus.PENDING.value:
            raise ValidationError({"status": [f"Review has already been {self.status}"]})

    def approve(self):
        self._assert_pending()
        now = datetime.now()
        self.status = ReviewStatus.APPROVED.value
        self.updated_at = now
        self.raise_(ReviewApproved(review_id=self.id, product_id=self.product_id, rating=self.rating, approved_at=now))

    def reject(self):
        self._assert_pending()
        now = datetime.now()
        self.status = ReviewStatus.REJECTED.value
        self.updated_at = now
        self.raise_(ReviewRejected(review_id=self.id, product_id=self.product_id, rejected_at=now))

    def vote(self, user_id, helpful):
        if any(str(v.user_id) == str(user_id) for v in self.votes):
            raise ValidationError({"votes": ["You have already voted on this review"]})

        self.add_votes(HelpfulVote(user_id=user_id, helpful=helpful, voted_at=datetime.now()))
        if helpful:
            self.helpful_yes = (self.helpful_yes or 0) + 1
        else:
            self.helpful_no = (self.helpful_no or 0) + 1

        self.updated_at = datetime.now()
        self.raise_(
            HelpfulVoteRecorded(
                review_id=self.id,
                user_id=user_id,
                helpful=helpful,
                helpful_yes=self.helpful_yes,
                helpful_no=self.helpful_no,
            )
        )
