"""VoteOnReview — mark a review as helpful or not."""

from protean import handle
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from store.domain import store
from store.review.review import Review


@store.command(part_of="Review")
class VoteOnReview:
    review_id: Identifier(required=True)
    user_id: Identifier(required=True)
    helpful: Boolean(default=False)


@store.command_handler(part_of=Review)
class VoteOnReviewHandler:
    @handle(VoteOnReview)
    def vote(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        review.vote(command.user_id, bool(command.helpful))
        repo.add(review)
