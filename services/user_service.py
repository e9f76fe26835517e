from uuid import UUID

from sqlalchemy.orm import Session

from core.errors import Conflict, NotFound
from core.logger import get_logger
from core.security import hash_password
from models.user import User
from repositories.user_repo import UserRepository

logger = get_logger("users")

DEFAULT_SETTINGS = {
    "theme": "system",
    "language": "en",
    "dailyGoal": 20,
    "notificationsEnabled": True,
}


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def register(self, *, email: str, password: str, name: str | None = None) -> User:
        if self.repo.get_by_email(email):
            raise Conflict("Email already registered")
        user = self.repo.create(
            email=email,
            name=name,
            password_hash=hash_password(password),
            settings=dict(DEFAULT_SETTINGS),
        )
        logger.info("registered user %s", user.id)
        return user

    def get(self, user_id: UUID) -> User:
        user = self.repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def get_settings(self, user_id: UUID) -> dict:
        return {**DEFAULT_SETTINGS, **self.get(user_id).settings}

    def update_settings(self, user_id: UUID, changes: dict) -> dict:
        user = self.get(user_id)
        merged = {**DEFAULT_SETTINGS, **user.settings, **changes}
        self.repo.update_settings(user, merged)
        return merged

    def delete(self, user_id: UUID) -> None:
        user = self.get(user_id)
        self.repo.delete(user)
        logger.info("deleted user %s and their records", user_id)
