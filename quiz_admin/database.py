"""Database utilities and setup."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase

from quiz_admin.config import DATABASE_URL

# Create engine
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)


# Base class for models
class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def init_db(bind: Engine | None = None) -> None:
    """Initialize database (create all tables)."""
    # Registers the storage tables on Base.metadata
    import quiz_admin.models.db  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
