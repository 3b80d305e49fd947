# portfolio_api/schemas/portfolio_item.py
from pydantic import BaseModel, Field
from typing import Optional, List

from portfolio_api.schemas.base import BaseSchema


class PortfolioItem(BaseSchema):
    id: int
    name: str = Field(min_length=1)
    description: str
    technologies: List[str] = []
    url: Optional[str] = None
    github: Optional[str] = None


class Message(BaseModel):
    message: str
