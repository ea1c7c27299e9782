import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import List, Protocol

from pydantic_models import QueryLogEntry


class QueryLogSink(Protocol):
    """Append-only store of answered questions."""

    def append(self, question: str, response: str) -> QueryLogEntry:
        ...

    def recent(self, limit: int = 10) -> List[QueryLogEntry]:
        ...


class SQLiteQueryLog:
    def __init__(self, db_path: str):
        self.db_path = db_path
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_db(self):
        # idempotent create
        d = os.path.dirname(self.db_path)
        if d and not os.path.exists(d):
            os.makedirs(d, exist_ok=True)
        conn = self._connect()
        try:
            conn.execute("""
            CREATE TABLE IF NOT EXISTS query_log (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                question TEXT NOT NULL,
                response TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """)
            conn.commit()
        finally:
            conn.close()

    def append(self, question: str, response: str) -> QueryLogEntry:
        conn = self._connect()
        try:
            cur = conn.execute(
                "INSERT INTO query_log (question, response) VALUES (?, ?)",
                (question, response),
            )
            conn.commit()
            row = conn.execute(
                "SELECT id, question, response, created_at FROM query_log WHERE id = ?",
                (cur.lastrowid,),
            ).fetchone()
        finally:
            conn.close()
        return _to_entry(row)

    def recent(self, limit: int = 10) -> List[QueryLogEntry]:
        # LIMIT -1 means unbounded in SQLite
        if limit < 1:
            return []
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, question, response, created_at FROM query_log ORDER BY id DESC LIMIT ?",
                (limit,),
            ).fetchall()
        finally:
            conn.close()
        return [_to_entry(r) for r in rows]


class InMemoryQueryLog:
    def __init__(self):
        self._entries: List[QueryLogEntry] = []
        self._lock = threading.Lock()

    def append(self, question: str, response: str) -> QueryLogEntry:
        with self._lock:
            entry = QueryLogEntry(
                id=len(self._entries) + 1,
                question=question,
                response=response,
                created_at=datetime.now(timezone.utc),
            )
            self._entries.append(entry)
        return entry

    def recent(self, limit: int = 10) -> List[QueryLogEntry]:
        with self._lock:
            return list(reversed(self._entries[-limit:])) if limit > 0 else []


def _to_entry(row) -> QueryLogEntry:
    id_, question, response, created_at = row
    # CURRENT_TIMESTAMP is UTC
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at)
    return QueryLogEntry(
        id=id_,
        question=question,
        response=response,
        created_at=created_at.replace(tzinfo=timezone.utc),
    )
