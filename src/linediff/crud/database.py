"""Database engine and session helpers"""

import os
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

# Register table metadata before create_all
import linediff.crud.models  # noqa: F401


DEFAULT_URL = "sqlite:///linediff.db"


def get_url(explicit: str | None = None) -> str:
    """Return explicit, else LINEDIFF_DB_URL, else the SQLite default."""
    if explicit:
        return explicit
    return os.getenv("LINEDIFF_DB_URL") or DEFAULT_URL


def make_engine(db_url: str) -> Engine:
    return create_engine(db_url, echo=False)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    SQLModel.metadata.create_all(engine)


def get_session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
