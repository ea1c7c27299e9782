from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Assistant settings loaded from environment variables (or .env)."""

    def __init__(self):
        self.responder: str = os.getenv("ASSISTANT_RESPONDER", "keyword").strip().lower()
        self.openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY") or None
        self.openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.llm_timeout_secs: float = float(os.getenv("LLM_TIMEOUT_SECS", "15"))
        self.query_log_enabled: bool = _env_bool("QUERY_LOG_ENABLED", "true")
        self.query_log_db: str = os.getenv("QUERY_LOG_DB", "history.db")
        self.api_url: str = os.getenv("ASSISTANT_API_URL", "http://127.0.0.1:5000").rstrip("/")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
