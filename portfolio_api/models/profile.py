# portfolio_api/models/profile.py
from sqlalchemy import Column, Integer, String, Text

from portfolio_api.db.session import Base


class Profile(Base):
    __tablename__ = "profile"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    title = Column(String, nullable=False)
    bio = Column(Text, nullable=False)
    avatar_url = Column(Text, nullable=False)
    github = Column(String, nullable=True)
    linkedin = Column(String, nullable=True)

    def as_dict(self) -> dict:
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}
