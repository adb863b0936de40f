"""Unit tests for crud/database.py"""

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import Session

from linediff.crud.database import get_session, get_url, init_db, make_engine


SQLITE_MEM = "sqlite://"


def test_get_url_returns_explicit(monkeypatch):
    """get_url returns the explicit URL when provided, ignoring env."""
    monkeypatch.setenv("LINEDIFF_DB_URL", "sqlite:///env.db")
    assert get_url("postgresql://host/db") == "postgresql://host/db"


def test_get_url_reads_env(monkeypatch):
    """get_url reads LINEDIFF_DB_URL from the environment when no arg is given."""
    monkeypatch.setenv("LINEDIFF_DB_URL", "sqlite:///env.db")
    assert get_url() == "sqlite:///env.db"


def test_get_url_defaults_to_sqlite():
    """get_url returns the SQLite default when no arg or env var is configured."""
    assert get_url() == "sqlite:///linediff.db"


def test_make_engine_returns_engine():
    """make_engine returns an SQLAlchemy Engine instance."""
    assert isinstance(make_engine(SQLITE_MEM), Engine)


def test_init_db_creates_history_table():
    """init_db creates the history_entries table on the engine."""
    engine = make_engine(SQLITE_MEM)
    init_db(engine)
    assert "history_entries" in inspect(engine).get_table_names()


def test_get_session_yields_session():
    """get_session yields a usable SQLModel Session."""
    engine = make_engine(SQLITE_MEM)
    init_db(engine)
    session = next(get_session(engine))
    assert isinstance(session, Session)
