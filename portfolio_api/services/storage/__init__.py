# portfolio_api/services/storage/__init__.py
from portfolio_api.core.config import Settings
from portfolio_api.core.logging import logger
from portfolio_api.db.init_db import init_db
from portfolio_api.db.session import create_db_engine, create_session_factory
from portfolio_api.services.storage.base import PortfolioStorage
from portfolio_api.services.storage.database import DatabaseStorage
from portfolio_api.services.storage.file import FileStorage


def create_storage(settings: Settings) -> PortfolioStorage:
    """Build the photo/profile storage selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "database":
        engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)
        init_db(engine)
        logger.info(f"Using database storage: {engine.url.render_as_string(hide_password=True)}")
        return DatabaseStorage(create_session_factory(engine))

    logger.info(f"Using file storage: {settings.DATA_DIR}")
    return FileStorage(settings.DATA_DIR)


__all__ = ["PortfolioStorage", "DatabaseStorage", "FileStorage", "create_storage"]
