"""In-process key-value store scoped by client session.

Values are opaque JSON-compatible objects. The tools read and write
prefs_v1 and search_history_v1; other keys are stored as given.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

PREFS_KEY = "prefs_v1"
SEARCH_HISTORY_KEY = "search_history_v1"

MAX_HISTORY = 50


class SessionEntry(BaseModel):
    session_id: str
    values: dict[str, Any] = {}
    updated_at: datetime


class SessionStore:
    def __init__(self, max_sessions: int = 1000) -> None:
        self._sessions: dict[str, SessionEntry] = {}
        self._max_sessions = max_sessions

    def _evict(self) -> None:
        if len(self._sessions) <= self._max_sessions:
            return
        # Least recently written sessions go first
        candidates = sorted(self._sessions.values(), key=lambda s: s.updated_at)
        while len(self._sessions) > self._max_sessions and candidates:
            self._sessions.pop(candidates.pop(0).session_id, None)

    def get(self, session_id: str, key: str, default: Any = None) -> Any:
        entry = self._sessions.get(session_id)
        if entry is None:
            return default
        return entry.values.get(key, default)

    def set(self, session_id: str, key: str, value: Any) -> None:
        entry = self._sessions.get(session_id)
        now = datetime.now(timezone.utc)
        if entry is None:
            entry = SessionEntry(session_id=session_id, updated_at=now)
            self._sessions[session_id] = entry
        entry.values[key] = value
        entry.updated_at = now
        self._evict()

    def record_search(self, session_id: str, query: str) -> None:
        """Prepend a query to the session's history, newest first."""
        history = self.get(session_id, SEARCH_HISTORY_KEY, [])
        if not isinstance(history, list):
            history = []
        item = {"query": query, "timestamp": int(datetime.now(timezone.utc).timestamp() * 1000)}
        self.set(session_id, SEARCH_HISTORY_KEY, [item, *history][:MAX_HISTORY])
