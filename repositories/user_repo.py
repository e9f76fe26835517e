from uuid import UUID

from sqlalchemy.orm import Session
from sqlalchemy import select
from models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    def get_by_id(self, user_id: UUID) -> User | None:
        return self.db.get(User, user_id)

    def create(self, *, email: str, name: str | None, password_hash: str, settings: dict | None = None) -> User:
        user = User(email=email, name=name, password_hash=password_hash)
        user.settings = settings or {}
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_settings(self, user: User, settings: dict) -> User:
        user.settings = settings
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.db.delete(user)
        self.db.commit()
