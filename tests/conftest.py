"""
Pytest configuration and fixtures
"""
import pytest

from app import create_app
from config import Settings
from query_log import InMemoryQueryLog, SQLiteQueryLog
from responder import keyword_responder


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    s = Settings()
    s.responder = "keyword"
    s.query_log_enabled = True
    s.query_log_db = str(tmp_path / "history.db")
    return s


@pytest.fixture
def memory_sink() -> InMemoryQueryLog:
    return InMemoryQueryLog()


@pytest.fixture
def sqlite_sink(tmp_path) -> SQLiteQueryLog:
    return SQLiteQueryLog(str(tmp_path / "queries.db"))


@pytest.fixture
def client(settings, memory_sink):
    app = create_app(responder=keyword_responder, sink=memory_sink, settings=settings)
    app.config.update(TESTING=True)
    return app.test_client()
