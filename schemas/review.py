from datetime import datetime
from uuid import UUID

from pydantic import conlist

from schemas.base import CamelIn, CamelOut
from schemas.fields import Quality, VocabularyId

MAX_BATCH_REVIEWS = 50


class ReviewIn(CamelIn):
    vocabulary_id: VocabularyId
    quality: Quality


class ReviewBatchIn(CamelIn):
    reviews: conlist(ReviewIn, min_length=1, max_length=MAX_BATCH_REVIEWS)


class ReviewOut(CamelOut):
    id: UUID
    vocabulary_id: UUID
    ease_factor: float
    interval: int
    repetitions: int
    next_review: datetime
    last_reviewed: datetime | None = None
    quality: int | None = None
    created_at: datetime


class DueReviewOut(ReviewOut):
    word: str


class ReviewStatsOut(CamelOut):
    total: int
    due: int
    reviewed_today: int
    average_ease_factor: float | None = None
