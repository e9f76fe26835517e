from datetime import datetime, time
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import utcnow
from core.errors import Conflict, NotFound
from core.logger import get_logger
from models.review import Review, DEFAULT_EASE_FACTOR
from repositories.review_repo import ReviewRepository
from repositories.vocabulary_repo import VocabularyRepository
from schemas.review import ReviewIn
from services.scheduler import Scheduler, schedule

logger = get_logger("reviews", prefix="[REVIEWS]")

CONCURRENT_WRITE = "Review was modified concurrently, resubmit"


class ReviewService:
    """Advances per-(user, vocabulary) review state with validated quality scores.

    The first submission for a pair inserts the row; every later one updates
    it in place. Quality must already be an int in 0..5.
    """

    def __init__(self, db: Session, scheduler: Scheduler = schedule):
        self.db = db
        self.repo = ReviewRepository(db)
        self.vocabulary_repo = VocabularyRepository(db)
        self.scheduler = scheduler

    def _apply(self, *, user_id: UUID, vocabulary_id: UUID, quality: int, now: datetime) -> Review:
        if self.vocabulary_repo.get(vocabulary_id=vocabulary_id, user_id=user_id) is None:
            raise NotFound(f"Vocabulary {vocabulary_id} not found")

        review = self.repo.get_for_vocabulary(user_id=user_id, vocabulary_id=vocabulary_id)
        if review is None:
            review = self.repo.new(user_id=user_id, vocabulary_id=vocabulary_id, now=now)

        result = self.scheduler(
            ease_factor=review.ease_factor if review.ease_factor is not None else DEFAULT_EASE_FACTOR,
            interval=review.interval or 0,
            repetitions=review.repetitions or 0,
            quality=quality,
            now=now,
        )
        review.ease_factor = result.ease_factor
        review.interval = result.interval
        review.repetitions = result.repetitions
        review.next_review = result.next_review
        review.last_reviewed = now
        review.quality = quality
        return self.repo.save(review)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("concurrent review write rejected: %s", exc.orig)
            raise Conflict(CONCURRENT_WRITE) from exc

    def submit(self, *, user_id: UUID, vocabulary_id: UUID, quality: int, now: datetime | None = None) -> Review:
        now = now or utcnow()
        try:
            review = self._apply(user_id=user_id, vocabulary_id=vocabulary_id, quality=quality, now=now)
        except IntegrityError as exc:
            self.db.rollback()
            raise Conflict(CONCURRENT_WRITE) from exc
        self._commit()
        self.db.refresh(review)
        logger.debug("user %s reviewed %s q=%s next=%s", user_id, vocabulary_id, quality, review.next_review)
        return review

    def submit_batch(self, *, user_id: UUID, items: list[ReviewIn], now: datetime | None = None) -> list[Review]:
        now = now or utcnow()
        reviews = []
        try:
            for item in items:
                reviews.append(
                    self._apply(
                        user_id=user_id,
                        vocabulary_id=item.vocabulary_id,
                        quality=item.quality,
                        now=now,
                    )
                )
        except IntegrityError as exc:
            self.db.rollback()
            raise Conflict(CONCURRENT_WRITE) from exc
        except NotFound:
            self.db.rollback()
            raise
        self._commit()
        for review in reviews:
            self.db.refresh(review)
        logger.info("user %s submitted %d reviews", user_id, len(reviews))
        return reviews

    def get(self, *, user_id: UUID, vocabulary_id: UUID) -> Review:
        review = self.repo.get_for_vocabulary(user_id=user_id, vocabulary_id=vocabulary_id)
        if review is None:
            raise NotFound(f"No review for vocabulary {vocabulary_id}")
        return review

    def due(self, *, user_id: UUID, limit: int = 20, now: datetime | None = None) -> list[Review]:
        return self.repo.list_due(user_id=user_id, now=now or utcnow(), limit=limit)

    def stats(self, *, user_id: UUID, now: datetime | None = None) -> dict:
        now = now or utcnow()
        start_of_day = datetime.combine(now.date(), time.min)
        average = self.repo.average_ease(user_id)
        return {
            "total": self.repo.count_for_user(user_id),
            "due": self.repo.count_due(user_id=user_id, now=now),
            "reviewed_today": self.repo.count_reviewed_since(user_id=user_id, since=start_of_day),
            "average_ease_factor": round(float(average), 2) if average is not None else None,
        }
