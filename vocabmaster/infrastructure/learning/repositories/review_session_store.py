"""Process-local registry of live review sessions."""

import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from vocabmaster.application.learning.use_cases.dtos.review_session_dtos import (
    ActiveReviewSession,
)
from vocabmaster.domain.common.value_objects.ids import ReviewSessionId, UserId

logger = structlog.get_logger(__name__)

# Sessions untouched this long are treated as abandoned
DEFAULT_IDLE_TIMEOUT_SECONDS = 2 * 60 * 60
# Starting one more evicts the user's least recently used session
DEFAULT_MAX_SESSIONS_PER_USER = 10


@dataclass
class _Entry:
    active: ActiveReviewSession
    last_used_at: float


class InMemoryReviewSessionStore:
    """
    Keeps live review sessions in memory, keyed by session ID.

    Sync route handlers run on a thread pool, so every access goes through
    one lock. A lease holds the lock for the whole engine call, which keeps
    flip, grade and undo atomic per session. Sessions are lost on restart.

    Clients that navigate away without closing leave their session behind,
    so sessions idle for longer than ``idle_timeout_seconds`` are dropped
    and each user keeps at most ``max_sessions_per_user`` sessions.
    """

    def __init__(
        self,
        idle_timeout_seconds: float = DEFAULT_IDLE_TIMEOUT_SECONDS,
        max_sessions_per_user: int = DEFAULT_MAX_SESSIONS_PER_USER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if idle_timeout_seconds <= 0:
            raise ValueError("idle_timeout_seconds must be positive")
        if max_sessions_per_user < 1:
            raise ValueError("max_sessions_per_user must be at least 1")
        self.idle_timeout_seconds = idle_timeout_seconds
        self.max_sessions_per_user = max_sessions_per_user
        self.clock = clock
        self._entries: dict[ReviewSessionId, _Entry] = {}
        self._lock = threading.RLock()

    def add(self, active: ActiveReviewSession) -> None:
        with self._lock:
            now = self.clock()
            self._expire_idle(now)
            self._entries[active.id] = _Entry(active=active, last_used_at=now)
            self._enforce_user_cap(active.user_id)

    @contextmanager
    def lease(
        self, session_id: ReviewSessionId, user_id: UserId
    ) -> Iterator[ActiveReviewSession | None]:
        with self._lock:
            now = self.clock()
            self._expire_idle(now)
            entry = self._owned(session_id, user_id)
            if entry is None:
                yield None
                return
            entry.last_used_at = now
            yield entry.active

    def pop(self, session_id: ReviewSessionId, user_id: UserId) -> ActiveReviewSession | None:
        with self._lock:
            self._expire_idle(self.clock())
            entry = self._owned(session_id, user_id)
            if entry is None:
                return None
            del self._entries[session_id]
            return entry.active

    def reset(self) -> None:
        """Drop every session."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _owned(self, session_id: ReviewSessionId, user_id: UserId) -> _Entry | None:
        entry = self._entries.get(session_id)
        # A foreign session looks exactly like a missing one
        if entry is None or entry.active.user_id != user_id:
            return None
        return entry

    def _expire_idle(self, now: float) -> None:
        expired = [
            session_id
            for session_id, entry in self._entries.items()
            if now - entry.last_used_at > self.idle_timeout_seconds
        ]
        for session_id in expired:
            del self._entries[session_id]
        if expired:
            logger.info("expired_idle_review_sessions", count=len(expired))

    def _enforce_user_cap(self, user_id: UserId) -> None:
        owned = sorted(
            (
                (entry.last_used_at, session_id)
                for session_id, entry in self._entries.items()
                if entry.active.user_id == user_id
            ),
            key=lambda item: item[0],
        )
        for _, session_id in owned[: max(0, len(owned) - self.max_sessions_per_user)]:
            del self._entries[session_id]
            logger.info("evicted_review_session", session_id=str(session_id))
