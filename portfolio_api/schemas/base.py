# portfolio_api/schemas/base.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire"""
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def reject_null(value, info):
    """Fields that are required on create may be omitted on update, but not nulled."""
    if value is None:
        raise ValueError(f"{info.field_name} may not be null")
    return value
