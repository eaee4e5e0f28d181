"""Database helpers: engines, session factories and DB initialization.

A `Database` owns the read/write engines and their session factories. It is
constructed once per process by the application lifespan and handed to
request handlers through dependency injection; engines are only disposed at
shutdown.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from .models import Base
from core.logger import get_logger

logger = get_logger("database")


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str):
    """Create an engine for `url` with SQLite-specific connection options.

    SQLite connections are shared across FastAPI's worker threads, and an
    in-memory database needs a single static connection or every session
    would see its own empty schema.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


class Database:
    """Read/write partitioned connection handle.

    In production, point `write_url` and `read_url` at different instances.
    When they match (the SQLite default) one engine serves both.

    Attributes:
        write_engine: Engine for statements that mutate state.
        read_engine: Engine for read-only endpoints.
        WriteSessionLocal: Session factory bound to the write engine.
        ReadSessionLocal: Session factory bound to the read engine.
    """

    def __init__(self, write_url: str, read_url: str = None):
        read_url = read_url or write_url
        self.write_engine = create_db_engine(write_url)
        if read_url == write_url:
            self.read_engine = self.write_engine
        else:
            self.read_engine = create_db_engine(read_url)

        self.WriteSessionLocal = sessionmaker(bind=self.write_engine)
        self.ReadSessionLocal = sessionmaker(bind=self.read_engine)

    def init_db(self):
        """Create all tables defined on the ORM metadata."""
        Base.metadata.create_all(bind=self.write_engine)
        logger.info("Database schema ready (%s)", self.write_engine.url.render_as_string(hide_password=True))

    def dispose(self):
        """Close pooled connections. Called once at process shutdown."""
        self.write_engine.dispose()
        if self.read_engine is not self.write_engine:
            self.read_engine.dispose()

    def get_write_session(self):
        """Yield a write-enabled SQLAlchemy session for the request scope."""
        db = self.WriteSessionLocal()
        try:
            yield db
        finally:
            db.close()

    def get_read_session(self):
        """Yield a read-only SQLAlchemy session for the request scope.

        Used for read endpoints where routing reads to a replica may be desired.
        """
        db = self.ReadSessionLocal()
        try:
            yield db
        finally:
            db.close()
