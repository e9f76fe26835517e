from uuid import uuid4

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer, PrimaryKeyConstraint, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship

from core.database import Base, utcnow

DEFAULT_EASE_FACTOR = 2.5


class Review(Base):
    """Spaced-repetition state for one (user, vocabulary) pair."""

    __tablename__ = "reviews"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_reviews"),
        UniqueConstraint("userId", "vocabularyId", name="UQ_reviews_userId_vocabularyId"),
        Index("IX_reviews_userId", "userId"),
        Index("IX_reviews_nextReview", "nextReview"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    user_id = Column("userId", Uuid, ForeignKey("users.id", name="FK_reviews_users_userId"), nullable=False)
    vocabulary_id = Column(
        "vocabularyId",
        Uuid,
        ForeignKey("vocabularies.id", name="FK_reviews_vocabularies", ondelete="CASCADE"),
        nullable=False,
    )
    ease_factor = Column("easeFactor", Float, default=DEFAULT_EASE_FACTOR, server_default=str(DEFAULT_EASE_FACTOR))
    interval = Column("interval", Integer, nullable=False, default=0, server_default="0")
    repetitions = Column("repetitions", Integer, nullable=False, default=0, server_default="0")
    next_review = Column("nextReview", DateTime, nullable=False)
    last_reviewed = Column("lastReviewed", DateTime, nullable=True)
    quality = Column("quality", Integer, nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, server_default=func.now())

    user = relationship("User", back_populates="reviews")
    vocabulary = relationship("Vocabulary", back_populates="reviews")
