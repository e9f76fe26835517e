from datetime import datetime, timezone
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session

from core.config import settings
from core.logger import get_logger

logger = get_logger("database", prefix="[DATABASE]")

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE is a no-op in SQLite unless this pragma is on
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_database(bind: Engine | None = None) -> bool:
    """Create every table that does not exist yet."""
    from models import api_usage, review, session, tag, user, vocabulary  # noqa: F401

    target = bind or engine
    try:
        Base.metadata.create_all(bind=target)
    except Exception:
        logger.exception("database initialisation failed")
        return False
    logger.info("database ready at %s", target.url.render_as_string(hide_password=True))
    return True


# dependency
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching DATETIME2 columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
