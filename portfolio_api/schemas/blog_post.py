# portfolio_api/schemas/blog_post.py
from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime

from portfolio_api.schemas.base import BaseSchema, reject_null


class BlogPostCreate(BaseSchema):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None


class BlogPostUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("title", "content")
    @classmethod
    def required_not_null(cls, value, info):
        return reject_null(value, info)


class BlogPost(BlogPostCreate):
    id: int
    created_at: datetime
    updated_at: datetime
