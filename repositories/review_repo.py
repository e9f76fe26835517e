from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.review import Review, DEFAULT_EASE_FACTOR


class ReviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_vocabulary(self, *, user_id: UUID, vocabulary_id: UUID) -> Review | None:
        stmt = select(Review).where(
            Review.user_id == user_id,
            Review.vocabulary_id == vocabulary_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def new(self, *, user_id: UUID, vocabulary_id: UUID, now: datetime) -> Review:
        # first review of the pair, not persisted until save()
        return Review(
            user_id=user_id,
            vocabulary_id=vocabulary_id,
            ease_factor=DEFAULT_EASE_FACTOR,
            interval=0,
            repetitions=0,
            next_review=now,
        )

    def save(self, review: Review) -> Review:
        self.db.add(review)
        self.db.flush()
        return review

    def list_due(self, *, user_id: UUID, now: datetime, limit: int = 20) -> list[Review]:
        stmt = (
            select(Review)
            .where(Review.user_id == user_id, Review.next_review <= now)
            .order_by(Review.next_review)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())

    def count_for_user(self, user_id: UUID) -> int:
        stmt = select(func.count(Review.id)).where(Review.user_id == user_id)
        return self.db.execute(stmt).scalar_one()

    def count_due(self, *, user_id: UUID, now: datetime) -> int:
        stmt = select(func.count(Review.id)).where(Review.user_id == user_id, Review.next_review <= now)
        return self.db.execute(stmt).scalar_one()

    def count_reviewed_since(self, *, user_id: UUID, since: datetime) -> int:
        stmt = select(func.count(Review.id)).where(Review.user_id == user_id, Review.last_reviewed >= since)
        return self.db.execute(stmt).scalar_one()

    def average_ease(self, user_id: UUID) -> float | None:
        stmt = select(func.avg(Review.ease_factor)).where(Review.user_id == user_id)
        return self.db.execute(stmt).scalar_one()
