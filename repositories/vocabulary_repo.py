from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.tag import Tag
from models.vocabulary import Vocabulary


class VocabularyRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, *, vocabulary_id: UUID, user_id: UUID) -> Vocabulary | None:
        stmt = select(Vocabulary).where(
            Vocabulary.id == vocabulary_id,
            Vocabulary.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def _filtered(self, stmt, user_id: UUID, search: str | None):
        stmt = stmt.where(Vocabulary.user_id == user_id)
        if search:
            stmt = stmt.where(Vocabulary.word.ilike(f"%{search}%"))
        return stmt

    def list_for_user(self, *, user_id: UUID, offset: int = 0, limit: int = 20, search: str | None = None) -> list[Vocabulary]:
        stmt = (
            self._filtered(select(Vocabulary), user_id, search)
            .order_by(Vocabulary.created_at.desc(), Vocabulary.word)
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())

    def count(self, *, user_id: UUID, search: str | None = None) -> int:
        stmt = self._filtered(select(func.count(Vocabulary.id)), user_id, search)
        return self.db.execute(stmt).scalar_one()

    def find_tags(self, *, user_id: UUID, tag_ids: list[UUID]) -> list[Tag]:
        if not tag_ids:
            return []
        stmt = select(Tag).where(Tag.user_id == user_id, Tag.id.in_(tag_ids))
        return list(self.db.execute(stmt).scalars())

    def create(self, *, user_id: UUID, tags: list[Tag], **fields) -> Vocabulary:
        entity = Vocabulary(user_id=user_id, **fields)
        entity.tags = tags
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: Vocabulary, *, tags: list[Tag] | None = None, **fields) -> Vocabulary:
        for name, value in fields.items():
            setattr(entity, name, value)
        if tags is not None:
            entity.tags = tags
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: Vocabulary) -> None:
        self.db.delete(entity)
        self.db.commit()
