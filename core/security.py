from uuid import UUID

from fastapi import Depends, Header
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import Unauthorized
from repositories.user_repo import UserRepository
from schemas.fields import is_uuid4


pwd_ctx = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_ctx.verify(plain, hashed)


def current_user_id(
    x_user_id: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> UUID:
    """Caller identity as resolved upstream by the session layer.

    The id must belong to a stored user; a stale id for a deleted account is
    refused the same way as a missing header.
    """
    if not x_user_id or not is_uuid4(x_user_id):
        raise Unauthorized("Missing or malformed X-User-Id header")
    user_id = UUID(x_user_id)
    if UserRepository(db).get_by_id(user_id) is None:
        raise Unauthorized("Unknown user")
    return user_id
