"""Errors raised by workout execution.

None of these are fatal: they describe calls the engine refused, and the
session passed in is left exactly as it was.
"""

from uuid import UUID


class ExecutionError(Exception):
    """Base class for refused execution operations."""

    message = "Workout execution failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class WorkoutNotValidError(ExecutionError):
    """Raised when starting a workout that has no exercises."""

    message = "Workout cannot be started (no exercises)"


class SessionNotActiveError(ExecutionError):
    """Raised when advancing a session that is paused or finished."""

    message = "Session is not active"


class CannotAdvanceError(ExecutionError):
    """Raised when advancing would move past the end of the sequence."""

    message = "Cannot advance to next item"


class SessionNotFoundError(ExecutionError):
    """Raised by the session store for an unknown session id."""

    message = "Session not found"

    def __init__(self, session_id: UUID):
        self.session_id = session_id
        super().__init__(str(session_id))
