# portfolio_api/db/init_db.py
from sqlalchemy.engine import Engine

from portfolio_api.db.session import Base
from portfolio_api.core.logging import logger

# Import all models so they are registered with SQLAlchemy
from portfolio_api.models import Photo, Profile  # noqa: F401


def init_db(engine: Engine) -> None:
    """Create the photo and profile tables if they do not exist"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
