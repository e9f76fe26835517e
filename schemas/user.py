from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import AfterValidator, ConfigDict, EmailStr, Field, constr

from schemas.base import CamelIn, CamelOut
from schemas.fields import WholeNumber

ThemeLiteral = Literal["light", "dark", "system"]
LanguageCode = constr(pattern=r"^[a-z]{2}$")


class RegisterIn(CamelIn):
    email: Annotated[EmailStr, AfterValidator(str.lower)]
    password: str = Field(min_length=6, max_length=128)
    name: constr(strip_whitespace=True, max_length=255) | None = None


class UserSettingsIn(CamelIn):
    model_config = ConfigDict(extra="forbid")

    theme: ThemeLiteral | None = None
    language: LanguageCode | None = None
    daily_goal: Annotated[WholeNumber, Field(ge=1, le=500)] | None = None
    notifications_enabled: bool | None = None


class UserOut(CamelOut):
    id: UUID
    email: str
    name: str | None = None
    role: str
    email_verified: bool


class UserSettingsOut(CamelOut):
    settings: dict[str, Any]
