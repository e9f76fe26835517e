from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, ValidationInfo, conlist, constr, field_validator

from schemas.base import CamelIn, CamelOut, reject_null
from schemas.fields import AudioUrl, Difficulty, ImageUrl, TagId, WholeNumber
from schemas.tag import TagOut

MAX_TAGS_PER_WORD = 20

PartOfSpeech = Literal[
    "noun",
    "verb",
    "adjective",
    "adverb",
    "pronoun",
    "preposition",
    "conjunction",
    "interjection",
    "phrase",
    "other",
]
Word = constr(strip_whitespace=True, min_length=1, max_length=255)


class VocabularyCreateIn(CamelIn):
    word: Word
    pronunciation: constr(strip_whitespace=True, max_length=255) | None = None
    definition: constr(max_length=5000) | None = None
    example: constr(max_length=5000) | None = None
    part_of_speech: PartOfSpeech | None = None
    difficulty: Difficulty = 1
    image_url: ImageUrl | None = None
    audio_url: AudioUrl | None = None
    tag_ids: conlist(TagId, max_length=MAX_TAGS_PER_WORD) | None = None


class VocabularyUpdateIn(VocabularyCreateIn):
    word: Word | None = None
    difficulty: Difficulty | None = None

    @field_validator("word", "difficulty", mode="before")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class PageQuery(CamelIn):
    page: WholeNumber = Field(1, ge=1)
    limit: WholeNumber = Field(20, ge=1, le=100)
    search: constr(strip_whitespace=True, max_length=255) | None = None


class VocabularyOut(CamelOut):
    id: UUID
    word: str
    pronunciation: str | None = None
    definition: str | None = None
    example: str | None = None
    part_of_speech: str | None = None
    difficulty: int
    image_url: str | None = None
    audio_url: str | None = None
    tags: list[TagOut] = []
    created_at: datetime
    updated_at: datetime


class VocabularyPageOut(CamelOut):
    items: list[VocabularyOut]
    total: int
    page: int
    limit: int
