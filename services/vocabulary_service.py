from uuid import UUID

from sqlalchemy.orm import Session

from core.errors import FieldError, NotFound, ValidationFailed
from core.logger import get_logger
from models.tag import Tag
from models.vocabulary import Vocabulary
from repositories.vocabulary_repo import VocabularyRepository

logger = get_logger("vocabularies")

COLUMNS = (
    "word",
    "pronunciation",
    "definition",
    "example",
    "part_of_speech",
    "difficulty",
    "image_url",
    "audio_url",
)


def _to_columns(data: dict) -> dict:
    return {name: data[name] for name in COLUMNS if name in data}


class VocabularyService:
    def __init__(self, db: Session):
        self.repo = VocabularyRepository(db)

    def _resolve_tags(self, user_id: UUID, tag_ids: list[UUID]) -> list[Tag]:
        wanted = set(tag_ids)
        tags = self.repo.find_tags(user_id=user_id, tag_ids=list(wanted))
        missing = wanted - {tag.id for tag in tags}
        if missing:
            raise ValidationFailed(
                [
                    FieldError(
                        field="tagIds",
                        message="tagIds contains tags that do not exist",
                        value=sorted(str(tag_id) for tag_id in missing),
                        location="body",
                    )
                ]
            )
        return tags

    def get(self, *, user_id: UUID, vocabulary_id: UUID) -> Vocabulary:
        entity = self.repo.get(vocabulary_id=vocabulary_id, user_id=user_id)
        if entity is None:
            raise NotFound("Vocabulary not found")
        return entity

    def list(self, *, user_id: UUID, page: int = 1, limit: int = 20, search: str | None = None) -> tuple[list[Vocabulary], int]:
        items = self.repo.list_for_user(user_id=user_id, offset=(page - 1) * limit, limit=limit, search=search)
        return items, self.repo.count(user_id=user_id, search=search)

    def create(self, *, user_id: UUID, data: dict) -> Vocabulary:
        tags = self._resolve_tags(user_id, data.get("tag_ids") or [])
        entity = self.repo.create(user_id=user_id, tags=tags, **_to_columns(data))
        logger.info("user %s added word %r", user_id, entity.word)
        return entity

    def update(self, *, user_id: UUID, vocabulary_id: UUID, data: dict) -> Vocabulary:
        entity = self.get(user_id=user_id, vocabulary_id=vocabulary_id)
        tags = None
        if data.get("tag_ids") is not None:
            tags = self._resolve_tags(user_id, data["tag_ids"])
        return self.repo.update(entity, tags=tags, **_to_columns(data))

    def delete(self, *, user_id: UUID, vocabulary_id: UUID) -> None:
        entity = self.get(user_id=user_id, vocabulary_id=vocabulary_id)
        self.repo.delete(entity)
