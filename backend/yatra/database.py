from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from yatra.config import get_settings
from pathlib import Path
import logging
import uuid

logger = logging.getLogger(__name__)
settings = get_settings()

db_url = settings.database_url
is_sqlite = db_url.startswith("sqlite")

engine = create_engine(
    db_url,
    connect_args={"check_same_thread": False} if is_sqlite else {},
    pool_pre_ping=not is_sqlite,
)


if is_sqlite:
    # SQLite ignores REFERENCES clauses unless asked per connection
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def generate_uuid() -> str:
    return str(uuid.uuid4())


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create every mapped table. Used for SQLite dev databases; Postgres goes through Alembic."""
    # Import for side effects so every model is registered on Base.metadata
    import yatra.models  # noqa: F401

    # SQLite will not create the directory holding the database file
    if is_sqlite and engine.url.database not in (None, "", ":memory:"):
        Path(engine.url.database).parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(bind=engine)
    logger.info(f"Ensured {len(Base.metadata.tables)} tables exist")
