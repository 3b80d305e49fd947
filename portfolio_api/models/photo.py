# portfolio_api/models/photo.py
from sqlalchemy import Column, Integer, String, Text, JSON

from portfolio_api.db.session import Base


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    # Data URLs are stored inline, so this can be several megabytes
    image_url = Column(Text, nullable=False)
    category = Column(String, index=True, nullable=False)

    # Use JSON type for tags for SQLite compatibility
    tags = Column(JSON, nullable=True)
    ai_description = Column(Text, nullable=True)

    # Camera metadata
    iso = Column(Integer, nullable=True)
    aperture = Column(String, nullable=True)
    camera = Column(String, nullable=True)
    lens = Column(String, nullable=True)

    def as_dict(self) -> dict:
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}
