import json
from uuid import uuid4

from sqlalchemy import Boolean, Column, Index, PrimaryKeyConstraint, String, Unicode, UnicodeText, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from core.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="PK_users"),
        UniqueConstraint("email", name="UQ_users_email"),
        Index("IX_users_googleId", "googleId"),
    )

    id = Column("id", Uuid, nullable=False, default=uuid4)
    email = Column("email", String(255), nullable=False)
    name = Column("name", Unicode(255), nullable=True)
    password_hash = Column("passwordHash", String(255), nullable=True)
    role = Column("role", String(50), nullable=False, default="user", server_default="user")
    settings_json = Column("settings", UnicodeText, nullable=True)
    google_id = Column("googleId", String(255), nullable=True)
    email_verified = Column("emailVerified", Boolean, nullable=False, default=False, server_default="0")

    vocabularies = relationship("Vocabulary", back_populates="user", cascade="all, delete-orphan")
    tags = relationship("Tag", back_populates="user", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")

    @property
    def settings(self) -> dict:
        if not self.settings_json:
            return {}
        return json.loads(self.settings_json)

    @settings.setter
    def settings(self, value: dict) -> None:
        self.settings_json = json.dumps(value)
