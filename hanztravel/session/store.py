from __future__ import annotations

"""In-memory TTL registry of estimate sessions, one per interactive visit."""

from typing import Optional, Dict, Any, Callable, List
import time
import threading
import uuid

from hanztravel.obs.logger import log_event
from hanztravel.session.estimate_session import EstimateSession


class SessionStore:
    """Session dictionary with TTL semantics. Nothing is written to disk.

    Expired sessions are swept whenever a new one is created, so an idle
    store does not keep growing. ``on_evict`` is called with the session id
    of every session that is swept or cleared.
    """

    def __init__(self, factory: Callable[[str], EstimateSession], ttl_seconds: int = 1800,
                 on_evict: Optional[Callable[[str], Any]] = None):
        self.factory = factory
        self.ttl_seconds = ttl_seconds
        self.on_evict = on_evict
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, Any]] = {}

    def _expired(self, rec: Dict[str, Any]) -> bool:
        return (time.time() - rec.get("updated_at", 0)) > self.ttl_seconds

    def _evicted(self, session_ids: List[str], reason: str) -> None:
        # Called outside the store lock
        for session_id in session_ids:
            log_event("session_evicted", session_id=session_id, reason=reason)
            if self.on_evict is not None:
                self.on_evict(session_id)

    def sweep(self) -> int:
        """Drop every expired session; returns how many were removed."""
        with self._lock:
            expired = [sid for sid, rec in self._data.items() if self._expired(rec)]
            for sid in expired:
                del self._data[sid]
        self._evicted(expired, "expired")
        return len(expired)

    def create(self) -> EstimateSession:
        """Start a new session with default selections."""
        self.sweep()
        session_id = uuid.uuid4().hex
        session = self.factory(session_id)
        with self._lock:
            self._data[session_id] = {"session": session, "updated_at": time.time()}
        log_event("session_created", session_id=session_id)
        return session

    def get(self, session_id: str) -> Optional[EstimateSession]:
        """Return the session if present and not expired, else None."""
        with self._lock:
            rec = self._data.get(session_id)
            if not rec:
                return None
            if not self._expired(rec):
                return rec["session"]
            self._data.pop(session_id, None)
        self._evicted([session_id], "expired")
        return None

    def clear(self, session_id: str) -> None:
        with self._lock:
            removed = self._data.pop(session_id, None) is not None
        if removed:
            self._evicted([session_id], "cleared")

    def touch(self, session_id: str) -> None:
        """Update last-seen timestamp to avoid expiration."""
        with self._lock:
            if session_id in self._data:
                self._data[session_id]["updated_at"] = time.time()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
