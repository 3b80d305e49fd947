# portfolio_api/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def create_db_engine(database_uri: str) -> Engine:
    return create_engine(
        database_uri,
        pool_pre_ping=True,
        connect_args={"check_same_thread": False} if database_uri.startswith("sqlite") else {}
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
