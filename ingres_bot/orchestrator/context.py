"""Conversation context management for the groundwater assistant."""

import logging
import threading
import time
import uuid
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ingres_bot.config.constants import Intent

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 10


@dataclass
class ConversationContext:
    """Per-session memory used to resolve follow-up questions."""

    session_id: str
    last_location: str | None = None
    last_state: str | None = None
    last_district: str | None = None
    last_intent: Intent = Intent.UNKNOWN
    history: deque[str] = field(default_factory=lambda: deque(maxlen=DEFAULT_HISTORY_SIZE))
    query_count: int = 0
    session_start: float = field(default_factory=time.time)
    last_active: float = field(default_factory=time.monotonic)

    # Set when a turn ends below the clarification threshold
    awaiting_clarification: bool = False
    pending_question: str | None = None

    @classmethod
    def create(
        cls,
        session_id: str | None = None,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> "ConversationContext":
        """Create an empty context. A random id is assigned when none is given."""
        return cls(
            session_id=session_id or uuid.uuid4().hex,
            history=deque(maxlen=history_size),
        )

    def update(
        self,
        raw_input: str,
        intent: Intent,
        location: str | None = None,
        state: str | None = None,
        district: str | None = None,
    ) -> None:
        """Record a processed turn.

        Location fields are only replaced when a non-empty value is given, so
        a follow-up without a place name keeps the previous one.
        """
        self.last_intent = intent
        self.query_count += 1
        if location:
            self.last_location = location
        if state:
            self.last_state = state
        if district:
            self.last_district = district
        self.history.append(raw_input)
        self.last_active = time.monotonic()

    def mark_clarification(self, question: str | None) -> None:
        self.awaiting_clarification = question is not None
        self.pending_question = question

    def destroy(self) -> None:
        """Clear history and every owned field."""
        self.history.clear()
        self.last_location = None
        self.last_state = None
        self.last_district = None
        self.last_intent = Intent.UNKNOWN
        self.query_count = 0
        self.awaiting_clarification = False
        self.pending_question = None

    def to_summary(self) -> dict:
        return {
            "session_id": self.session_id,
            "history": list(self.history),
            "last_intent": self.last_intent.value,
            "last_location": self.last_location,
            "last_state": self.last_state,
            "last_district": self.last_district,
            "query_count": self.query_count,
            "session_start": self.session_start,
            "awaiting_clarification": self.awaiting_clarification,
            "pending_question": self.pending_question,
        }


class ConversationStore:
    """In-memory store for conversation contexts by session_id."""

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE):
        self._history_size = history_size
        self._contexts: dict[str, ConversationContext] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> ConversationContext:
        """Get or create context for a session."""
        with self._lock:
            ctx = self._contexts.get(session_id)
            if ctx is None:
                ctx = ConversationContext.create(session_id, history_size=self._history_size)
                self._contexts[session_id] = ctx
                self._locks.setdefault(session_id, threading.Lock())
                logger.debug(f"Created conversation context for session {session_id}")
            return ctx

    def get(self, session_id: str) -> ConversationContext | None:
        with self._lock:
            return self._contexts.get(session_id)

    def session_lock(self, session_id: str) -> threading.Lock:
        """Lock serializing reads and updates of one session's context."""
        with self._lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    @contextmanager
    def session_guard(self, session_id: str) -> Iterator[threading.Lock]:
        """Hold the session's current lock for one turn.

        A waiter that wakes up on a lock discarded by destroy() or
        cleanup_idle() retries on the replacement, so at most one writer
        runs per session.
        """
        while True:
            lock = self.session_lock(session_id)
            lock.acquire()
            with self._lock:
                current = self._locks.get(session_id)
            if current is lock:
                break
            lock.release()
        try:
            yield lock
        finally:
            lock.release()

    def destroy(self, session_id: str) -> bool:
        """Tear down a session once any turn in progress has finished.

        Returns False if it did not exist.
        """
        with self.session_guard(session_id):
            with self._lock:
                ctx = self._contexts.pop(session_id, None)
                self._locks.pop(session_id, None)
            if ctx is None:
                return False
            ctx.destroy()
        logger.info(f"Destroyed conversation context for session {session_id}")
        return True

    def cleanup_idle(self, max_idle_seconds: float) -> int:
        """Drop sessions idle for at least max_idle_seconds. Returns the count removed.

        Sessions with a turn in progress are skipped.
        """
        now = time.monotonic()
        removed = 0
        with self._lock:
            idle = [
                session_id
                for session_id, ctx in self._contexts.items()
                if now - ctx.last_active >= max_idle_seconds
            ]
            for session_id in idle:
                lock = self._locks.get(session_id)
                if lock is not None and not lock.acquire(blocking=False):
                    continue
                try:
                    self._contexts.pop(session_id).destroy()
                    self._locks.pop(session_id, None)
                finally:
                    if lock is not None:
                        lock.release()
                removed += 1
        if removed:
            logger.info(f"Removed {removed} idle conversation contexts")
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._contexts)
