from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import current_user_id
from models.review import Review
from schemas.fields import PathId
from schemas.review import DueReviewOut, ReviewBatchIn, ReviewIn, ReviewOut, ReviewStatsOut
from services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _due_out(review: Review) -> DueReviewOut:
    data = ReviewOut.model_validate(review).model_dump()
    return DueReviewOut(**data, word=review.vocabulary.word)


@router.post("", response_model=ReviewOut)
async def submit_review(
    data: ReviewIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = ReviewService(db)
    review = svc.submit(user_id=user_id, vocabulary_id=data.vocabulary_id, quality=data.quality)
    return ReviewOut.model_validate(review)


@router.post("/batch", response_model=list[ReviewOut])
async def submit_reviews(
    data: ReviewBatchIn,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    reviews = ReviewService(db).submit_batch(user_id=user_id, items=data.reviews)
    return [ReviewOut.model_validate(review) for review in reviews]


@router.get("/due", response_model=list[DueReviewOut])
async def due_reviews(
    limit: int = Query(20, ge=1, le=100),
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    reviews = ReviewService(db).due(user_id=user_id, limit=limit)
    return [_due_out(review) for review in reviews]


@router.get("/stats", response_model=ReviewStatsOut)
async def review_stats(
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    return ReviewStatsOut.model_validate(ReviewService(db).stats(user_id=user_id))


@router.get("/{id}", response_model=ReviewOut)
async def get_review(
    id: PathId,
    user_id: UUID = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    review = ReviewService(db).get(user_id=user_id, vocabulary_id=id)
    return ReviewOut.model_validate(review)
