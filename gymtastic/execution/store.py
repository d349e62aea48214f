"""In-memory registry of live sessions for a host process.

The engine does not guard against concurrent use of one session. The store
does: each operation runs under a lock, and the stored snapshot is only
replaced when the engine call succeeds, so a refused operation leaves the
session as it was.
"""

import logging
import threading
from typing import Callable
from uuid import UUID

from gymtastic.models import Session, Summary, WorkoutDefinition
from .engine import ExecutionEngine
from .errors import SessionNotFoundError

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[UUID, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def ids(self) -> list[UUID]:
        with self._lock:
            return list(self._sessions)

    def get(self, session_id: UUID) -> Session:
        with self._lock:
            return self._get(session_id)

    def start(self, engine: ExecutionEngine, workout: WorkoutDefinition) -> Session:
        session = engine.start(workout)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def apply(
        self, session_id: UUID, transition: Callable[[Session], Session]
    ) -> Session:
        """Replace a session with `transition(session)`, all or nothing."""
        with self._lock:
            updated = transition(self._get(session_id))
            self._sessions[session_id] = updated
            return updated

    def finish(
        self, session_id: UUID, finisher: Callable[[Session], Summary]
    ) -> Summary:
        """Turn a session into its summary and forget it."""
        with self._lock:
            summary = finisher(self._get(session_id))
            del self._sessions[session_id]
        logger.debug(f"Removed session {session_id}, {len(self._sessions)} left")
        return summary

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def _get(self, session_id: UUID) -> Session:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
