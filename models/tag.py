from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, PrimaryKeyConstraint, String, Unicode, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship

from core.database import Base, utcnow
from models.vocabulary import vocabularies_tags


class Tag(Base):
    __tablename__ = "tags"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_tags"),
        UniqueConstraint("userId", "name", name="UQ_tags_userId_name"),
        Index("IX_tags_userId", "userId"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    user_id = Column(
        "userId",
        Uuid,
        ForeignKey("users.id", name="FK_tags_users_userId", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    name = Column("name", Unicode(255), nullable=False)
    color = Column("color", String(50), nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(
        "updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow, server_default=func.now()
    )

    user = relationship("User", back_populates="tags")
    vocabularies = relationship("Vocabulary", secondary=vocabularies_tags, back_populates="tags")
