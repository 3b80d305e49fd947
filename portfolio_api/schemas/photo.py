# portfolio_api/schemas/photo.py
from pydantic import Field, field_validator
from typing import Optional, List

from portfolio_api.schemas.base import BaseSchema, reject_null


class PhotoBase(BaseSchema):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: str = Field(min_length=1)
    category: str = Field(min_length=1)
    tags: Optional[List[str]] = None
    ai_description: Optional[str] = None
    iso: Optional[int] = None
    aperture: Optional[str] = None
    camera: Optional[str] = None
    lens: Optional[str] = None


class PhotoCreate(PhotoBase):
    pass


class PhotoUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[List[str]] = None
    ai_description: Optional[str] = None
    iso: Optional[int] = None
    aperture: Optional[str] = None
    camera: Optional[str] = None
    lens: Optional[str] = None

    @field_validator("title", "image_url", "category")
    @classmethod
    def required_not_null(cls, value, info):
        return reject_null(value, info)


class Photo(PhotoBase):
    id: int
