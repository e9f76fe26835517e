from pydantic import BaseModel, ConfigDict, ValidationInfo
from pydantic.alias_generators import to_camel


class CamelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class CamelIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def reject_null(value, info: ValidationInfo):
    """For optional update fields whose column is NOT NULL: absent is fine, null is not."""
    if value is None:
        raise ValueError(f"{to_camel(info.field_name)} cannot be null")
    return value
