"""Domain events for the Review aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from store.domain import store


@store.event(part_of="Review")
class ReviewSubmitted:
    """A review was submitted and awaits moderation."""

    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True)
    verified: Boolean(default=False)
    submitted_at: DateTime(required=True)


@store.event(part_of="Review")
class ReviewApproved:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True)
    approved_at: DateTime(required=True)


@store.event(part_of="Review")
class ReviewRejected:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rejected_at: DateTime(required=True)


@store.event(part_of="Review")
class HelpfulVoteRecorded:
    __version__ = 1

    review_id: Identifier(required=True)
    user_id: Identifier(required=True)
    helpful: Boolean(default=False)
    helpful_yes: Integer(required=True)
    helpful_no: Integer(required=True)
