# portfolio_api/schemas/profile.py
from pydantic import Field, field_validator
from typing import Optional

from portfolio_api.schemas.base import BaseSchema, reject_null

PROFILE_ID = 1


class ProfileBase(BaseSchema):
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    bio: str = Field(min_length=1)
    avatar_url: str = Field(min_length=1)
    github: Optional[str] = None
    linkedin: Optional[str] = None


class ProfileUpdate(BaseSchema):
    name: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    bio: Optional[str] = Field(default=None, min_length=1)
    avatar_url: Optional[str] = Field(default=None, min_length=1)
    github: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator("name", "title", "bio", "avatar_url")
    @classmethod
    def required_not_null(cls, value, info):
        return reject_null(value, info)


class Profile(ProfileBase):
    id: int = PROFILE_ID


def default_profile() -> Profile:
    """Placeholder profile served until the owner saves their own."""
    return Profile(
        id=PROFILE_ID,
        name="Your Name",
        title="Photographer",
        bio="Nature and fishing photography. Update this bio from the profile page.",
        avatar_url="/placeholder-avatar.jpg",
    )
