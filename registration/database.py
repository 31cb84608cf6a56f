import logging
from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from registration.config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class StorageError(Exception):
    """The database could not be opened, initialized or written."""


class DuplicateUsernameError(StorageError):
    """An insert was rejected by the unique index on users.username."""


def _get_engine():
    settings = get_settings()
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=settings.DEBUG,
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


engine = _get_engine()
SessionLocal = sessionmaker(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_storage(bind: Engine) -> None:
    """Make sure the database file's directory and the users table exist.

    Safe to call on every request: directory creation and ``create_all`` are
    both no-ops once the schema is in place.
    """
    # Register the mapped tables on Base.metadata
    import registration.models  # noqa: F401

    database = bind.url.database
    try:
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(bind=bind)
    except (OSError, SQLAlchemyError) as e:
        logger.exception("Storage initialization failed for %s", bind.url)
        raise StorageError(f"Database initialization failed: {e}") from e
