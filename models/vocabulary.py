from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    PrimaryKeyConstraint,
    String,
    Table,
    UnicodeText,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship

from core.database import Base, utcnow


vocabularies_tags = Table(
    "vocabulariesTags",
    Base.metadata,
    Column(
        "vocabularyId",
        Uuid,
        ForeignKey("vocabularies.id", name="FK_vocabulariesTags_vocabularies_vocabularyId"),
        nullable=False,
    ),
    Column(
        "tagId",
        Uuid,
        ForeignKey("tags.id", name="FK_vocabulariesTags_tags_tagId", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("vocabularyId", "tagId", name="PK_vocabulariesTags"),
)


class Vocabulary(Base):
    __tablename__ = "vocabularies"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_vocabularies"),
        Index("IX_vocabularies_userId", "userId"),
        Index("IX_vocabularies_word", "word"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    user_id = Column(
        "userId",
        Uuid,
        ForeignKey("users.id", name="FK_vocabularies_users_userId", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    word = Column("word", String(255), nullable=False)
    pronunciation = Column("pronunciation", String(255), nullable=True)
    definition = Column("definition", UnicodeText, nullable=True)
    example = Column("example", UnicodeText, nullable=True)
    part_of_speech = Column("partOfSpeech", String(255), nullable=True)
    difficulty = Column("difficulty", Integer, nullable=False, default=1, server_default="1")
    image_url = Column("imageUrl", String(255), nullable=True)
    audio_url = Column("audioUrl", String(255), nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(
        "updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now()
    )

    user = relationship("User", back_populates="vocabularies")
    tags = relationship("Tag", secondary=vocabularies_tags, back_populates="vocabularies")
    reviews = relationship("Review", back_populates="vocabulary", cascade="all, delete-orphan")
