"""FastAPI endpoints for product reviews and their moderation."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from store.api.deps import admin_user, current_user, get_or_404
from store.api.schemas import HelpfulVoteRequest, ModerateReviewRequest, SubmitReviewRequest
from store.api.serializers import review_payload
from store.product.product import Product
from store.review.moderation import ModerateReview
from store.review.review import Review
from store.review.submission import SubmitReview
from store.review.voting import VoteOnReview
from store.user.user import User

router = APIRouter(tags=["reviews"])


@router.post("/api/products/{product_id}/reviews", status_code=201)
async def submit_review(product_id: str, body: SubmitReviewRequest, user: User = Depends(current_user)) -> dict:
    get_or_404(Product, product_id, "Product")
    review_id = current_domain.process(
        SubmitReview(
            product_id=product_id,
            user_id=str(user.id),
            rating=body.rating,
            title=body.title,
            body=body.body,
        ),
        asynchronous=False,
    )
    return review_payload(current_domain.repository_for(Review).get(review_id))


@router.get("/api/products/{product_id}/reviews")
async def list_product_reviews(product_id: str) -> list[dict]:
    get_or_404(Product, product_id, "Product")
    return [review_payload(r) for r in current_domain.repository_for(Review).approved_for_product(product_id)]


@router.get("/api/reviews", dependencies=[Depends(admin_user)])
async def list_reviews(status: str | None = None) -> list[dict]:
    return [review_payload(r) for r in current_domain.repository_for(Review).by_status(status)]


@router.put("/api/reviews/{review_id}/moderate", dependencies=[Depends(admin_user)])
async def moderate_review(review_id: str, body: ModerateReviewRequest) -> dict:
    get_or_404(Review, review_id, "Review")
    current_domain.process(ModerateReview(review_id=review_id, action=body.action), asynchronous=False)
    return review_payload(current_domain.repository_for(Review).get(review_id))


@router.post("/api/reviews/{review_id}/helpful")
async def vote_on_review(review_id: str, body: HelpfulVoteRequest, user: User = Depends(current_user)) -> dict:
    get_or_404(Review, review_id, "Review")
    current_domain.process(
        VoteOnReview(review_id=review_id, user_id=str(user.id), helpful=body.helpful),
        asynchronous=False,
    )
    return review_payload(current_domain.repository_for(Review).get(review_id))
