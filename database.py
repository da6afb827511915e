import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the engine and session factory for one storage location.

    Built once by the application entry point and handed to the repository;
    close() must be called on shutdown.
    """

    def __init__(self, url: str = DATABASE_URL, echo: bool = False):
        self.url = url
        self.engine = create_engine(url, echo=echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_schema(self):
        # table modules must be imported so they register on Base.metadata
        import models.saved_game  # noqa: F401
        import models.board_cell  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema initialized at %s", self.url)

    def reset(self):
        """Drop every table and recreate the schema. Deletes all saved games."""
        Base.metadata.drop_all(bind=self.engine)
        self.init_schema()
        logger.info("Database reset completed")

    def session(self):
        return self.SessionLocal()

    def close(self):
        self.engine.dispose()
        logger.info("Database connection closed")
