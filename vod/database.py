import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(database_url: str):
    # SQLite needs check_same_thread=False for FastAPI
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, connect_args=connect_args, echo=False)


def make_session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind) -> None:
    """Create missing tables for every model registered on Base."""
    import vod.models  # noqa: F401 - load models

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured on %s", bind.url)
