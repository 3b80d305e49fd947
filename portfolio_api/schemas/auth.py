# portfolio_api/schemas/auth.py
from pydantic import Field

from portfolio_api.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    password: str = Field(min_length=1)


class LoginResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
