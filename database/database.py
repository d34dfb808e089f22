import contextlib
import logging
from typing import Any, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from database.models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns an engine and hands out sessions bound to it.

    One manager is built per application (or per test) and passed to whoever
    needs the store; nothing is kept at module level.
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None, **engine_kwargs: Any):
        if engine is None:
            if url is None:
                raise ValueError("Either url or engine is required")
            engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)
        self.engine = engine
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)

    @contextlib.contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Provide a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
