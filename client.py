"""HTTP client the front end uses to talk to the assistant backend."""

import logging

import pandas as pd
import requests

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["id", "question", "response", "created_at"]


class AssistantError(Exception):
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(resp: requests.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    return f"Backend returned HTTP {resp.status_code}"


def ask(question: str, api_url: str, timeout: float = 15) -> str:
    resp = requests.post(f"{api_url}/api/ask", json={"question": question}, timeout=timeout)
    if not resp.ok:
        raise AssistantError(_error_message(resp), resp.status_code)
    return resp.json()["answer"]


def recent_history(api_url: str, limit: int = 10, timeout: float = 15) -> pd.DataFrame:
    """Recent query log entries, newest first. Empty when the backend keeps no log."""
    resp = requests.get(f"{api_url}/api/history", params={"limit": limit}, timeout=timeout)
    if resp.status_code == 404:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    if not resp.ok:
        raise AssistantError(_error_message(resp), resp.status_code)
    entries = resp.json().get("entries", [])
    return pd.DataFrame(entries, columns=HISTORY_COLUMNS)
