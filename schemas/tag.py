from datetime import datetime
from uuid import UUID

from pydantic import ValidationInfo, constr, field_validator

from schemas.base import CamelIn, CamelOut, reject_null

TagName = constr(strip_whitespace=True, min_length=1, max_length=50, pattern=r"^[\w\- ]+$")
HexColor = constr(pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class TagCreateIn(CamelIn):
    name: TagName
    color: HexColor | None = None


class TagUpdateIn(TagCreateIn):
    name: TagName | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class TagOut(CamelOut):
    id: UUID
    name: str
    color: str | None = None
    created_at: datetime
