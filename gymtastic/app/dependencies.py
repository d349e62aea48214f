import logging

from gymtastic.execution import ExecutionEngine, SessionStore
from .env_loader import get_upcoming_entries_count

logger = logging.getLogger(__name__)

# Live sessions for this process; tests override `session_store`.
_store = SessionStore()


def execution_engine() -> ExecutionEngine:
    return ExecutionEngine()


def session_store() -> SessionStore:
    return _store


def upcoming_entries_count() -> int:
    return get_upcoming_entries_count()
