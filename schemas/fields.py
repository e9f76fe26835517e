import re
from typing import Annotated, Any
from uuid import UUID

from pydantic import AfterValidator, BeforeValidator, Field, HttpUrl, PlainSerializer

UUID4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_uuid4(value: Any) -> bool:
    return isinstance(value, str) and UUID4_PATTERN.fullmatch(value) is not None


def uuid4_check(name: str) -> BeforeValidator:
    """Strict v4 layout on the raw input, before pydantic's own UUID parsing."""

    def check(value: Any) -> Any:
        if not is_uuid4(value):
            raise ValueError(f"{name} must be a valid UUID v4")
        return value

    return BeforeValidator(check)


def _reject_bool(value: Any) -> Any:
    # pydantic's lax int mode would turn True into 1
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer")
    return value


def _url_length(name: str, limit: int):
    def check(value: HttpUrl) -> HttpUrl:
        if len(str(value)) > limit:
            raise ValueError(f"{name} must be at most {limit} characters")
        return value

    return AfterValidator(check)


def media_url(name: str):
    return Annotated[HttpUrl, _url_length(name, 255), PlainSerializer(str, return_type=str)]


WholeNumber = Annotated[int, BeforeValidator(_reject_bool)]

Quality = Annotated[WholeNumber, Field(ge=0, le=5)]
Difficulty = Annotated[WholeNumber, Field(ge=1, le=5)]
VocabularyId = Annotated[UUID, uuid4_check("vocabularyId")]
TagId = Annotated[UUID, uuid4_check("tagIds")]
PathId = Annotated[UUID, uuid4_check("id")]
ImageUrl = media_url("imageUrl")
AudioUrl = media_url("audioUrl")
