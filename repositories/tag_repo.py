from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.tag import Tag


class TagRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, *, tag_id: UUID, user_id: UUID) -> Tag | None:
        stmt = select(Tag).where(Tag.id == tag_id, Tag.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_name(self, *, user_id: UUID, name: str) -> Tag | None:
        stmt = select(Tag).where(Tag.user_id == user_id, Tag.name == name)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_user(self, user_id: UUID) -> list[Tag]:
        stmt = select(Tag).where(Tag.user_id == user_id).order_by(Tag.name)
        return list(self.db.execute(stmt).scalars())

    def create(self, *, user_id: UUID, name: str, color: str | None) -> Tag:
        tag = Tag(user_id=user_id, name=name, color=color)
        self.db.add(tag)
        self.db.commit()
        self.db.refresh(tag)
        return tag

    def update(self, tag: Tag, **fields) -> Tag:
        for name, value in fields.items():
            setattr(tag, name, value)
        self.db.commit()
        self.db.refresh(tag)
        return tag

    def delete(self, tag: Tag) -> None:
        self.db.delete(tag)
        self.db.commit()
