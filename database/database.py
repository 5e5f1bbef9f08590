"""Database helpers: engines, session factories and DB initialization.

Writes and reads go through separate session factories. Point
READ_DATABASE_URL at a replica to split them; by default both use
DATABASE_URL.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core.config import get_settings
from .models import Base


def _make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


_settings = get_settings()
WRITE_DATABASE_URL = _settings.DATABASE_URL
READ_DATABASE_URL = _settings.READ_DATABASE_URL or WRITE_DATABASE_URL

# Engines
write_engine = _make_engine(WRITE_DATABASE_URL)
read_engine = write_engine if READ_DATABASE_URL == WRITE_DATABASE_URL else _make_engine(READ_DATABASE_URL)

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db(engine=None):
    """Create every table that does not exist yet."""
    Base.metadata.create_all(bind=engine or write_engine)


def get_write_session():
    """Yield a write-enabled session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only session for the request scope."""
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
