from .engine import ExecutionEngine, Clock, utc_now
from .errors import (
    ExecutionError,
    WorkoutNotValidError,
    SessionNotActiveError,
    CannotAdvanceError,
    SessionNotFoundError,
)
from .store import SessionStore

__all__ = [
    "ExecutionEngine",
    "Clock",
    "utc_now",
    "ExecutionError",
    "WorkoutNotValidError",
    "SessionNotActiveError",
    "CannotAdvanceError",
    "SessionNotFoundError",
    "SessionStore",
]
