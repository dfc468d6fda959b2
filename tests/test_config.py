# tests/test_config.py

import logging

from app.core.config import Settings
from app.core.logging import setup_logging
from app.db.session import _build_engine, _is_memory_sqlite


def test_database_url_defaults_to_sqlite_path(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_ECHO", raising=False)
    s = Settings(SQLITE_PATH="data/todo.db", ENV="prod", _env_file=None)
    assert s.DATABASE_URL == "sqlite:///data/todo.db"
    assert s.DB_ECHO is False


def test_explicit_database_url_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/todo")
    s = Settings(_env_file=None)
    assert s.DATABASE_URL == "postgresql://u:p@db/todo"


def test_memory_sqlite_detection():
    assert _is_memory_sqlite("sqlite://")
    assert _is_memory_sqlite("sqlite:///:memory:")
    assert not _is_memory_sqlite("sqlite:///todo.db")
    assert not _is_memory_sqlite("postgresql://u:p@db/todo")


def test_memory_engine_shares_one_connection():
    engine = _build_engine("sqlite://")
    with engine.connect() as a:
        a.exec_driver_sql("CREATE TABLE t (x INTEGER)")
        a.commit()
    with engine.connect() as b:
        assert b.exec_driver_sql("SELECT count(*) FROM t").scalar() == 0
    engine.dispose()


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG")
    setup_logging("WARNING")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
