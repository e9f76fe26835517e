from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, PrimaryKeyConstraint, String, UnicodeText, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from core.database import Base


class UserSession(Base):
    """Row owned by the external session store; mapped so cascades reach it."""

    __tablename__ = "sessions"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_sessions"),
        UniqueConstraint("sid", name="UQ_sessions_sid"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    sid = Column("sid", String(255), nullable=False)
    user_id = Column(
        "userId",
        Uuid,
        ForeignKey("users.id", name="FK_sessions_users_userId", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    expires_at = Column("expiresAt", DateTime, nullable=False)
    data = Column("date", UnicodeText, nullable=True)

    user = relationship("User", back_populates="sessions")
