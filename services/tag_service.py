from uuid import UUID

from sqlalchemy.orm import Session

from core.errors import Conflict, NotFound
from models.tag import Tag
from repositories.tag_repo import TagRepository


class TagService:
    def __init__(self, db: Session):
        self.repo = TagRepository(db)

    def list(self, user_id: UUID) -> list[Tag]:
        return self.repo.list_for_user(user_id)

    def create(self, *, user_id: UUID, name: str, color: str | None = None) -> Tag:
        if self.repo.get_by_name(user_id=user_id, name=name):
            raise Conflict(f"Tag {name!r} already exists")
        return self.repo.create(user_id=user_id, name=name, color=color)

    def update(self, *, user_id: UUID, tag_id: UUID, data: dict) -> Tag:
        tag = self.repo.get(tag_id=tag_id, user_id=user_id)
        if tag is None:
            raise NotFound("Tag not found")
        name = data.get("name")
        if name and name != tag.name and self.repo.get_by_name(user_id=user_id, name=name):
            raise Conflict(f"Tag {name!r} already exists")
        fields = {key: data[key] for key in ("name", "color") if key in data}
        return self.repo.update(tag, **fields)

    def delete(self, *, user_id: UUID, tag_id: UUID) -> None:
        tag = self.repo.get(tag_id=tag_id, user_id=user_id)
        if tag is None:
            raise NotFound("Tag not found")
        self.repo.delete(tag)
