"""Value types produced by the execution engine."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .workout import BreakEntry, ExerciseEntry, WorkoutDefinition


SessionStatus = Literal["active", "paused", "completed", "stopped"]

TERMINAL_STATUSES: frozenset[SessionStatus] = frozenset({"completed", "stopped"})


class Session(BaseModel):
    """A snapshot of a workout being executed.

    Sessions are never mutated in place: every engine transition returns a new
    snapshot, and the caller must treat the latest one as the only valid state.
    Countdowns are not stored; they are derived from start times and the
    current time whenever they are asked for.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    workout: WorkoutDefinition
    start_time: datetime
    current_item_index: int = 0
    completed_item_indices: tuple[int, ...] = ()
    status: SessionStatus = "active"
    paused_at: datetime | None = None

    # Set tracking for multi-set repetition exercises
    current_set: int | None = None  # 1-based
    is_on_set_break: bool = False
    set_break_start_time: datetime | None = None
    set_break_duration_seconds: int | None = None

    # Timer for a break entry in the sequence
    regular_break_start_time: datetime | None = None

    @property
    def current_entry(self) -> ExerciseEntry | BreakEntry | None:
        """The entry being executed, or None once the last one has been passed."""
        sequence = self.workout.ordered_sequence
        if self.current_item_index >= len(sequence):
            return None
        return sequence[self.current_item_index]

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def elapsed_seconds(self, now: datetime) -> float:
        """Wall-clock seconds since start, frozen at the pause time while paused."""
        if self.paused_at is not None:
            return (self.paused_at - self.start_time).total_seconds()
        return (now - self.start_time).total_seconds()

    def remaining_set_break_seconds(self, now: datetime) -> int | None:
        if (
            not self.is_on_set_break
            or self.set_break_start_time is None
            or self.set_break_duration_seconds is None
        ):
            return None
        elapsed = int((now - self.set_break_start_time).total_seconds())
        return max(0, self.set_break_duration_seconds - elapsed)

    def remaining_regular_break_seconds(self, now: datetime) -> int | None:
        entry = self.current_entry
        if not isinstance(entry, BreakEntry) or self.regular_break_start_time is None:
            return None
        elapsed = int((now - self.regular_break_start_time).total_seconds())
        return max(0, entry.duration_seconds - elapsed)


class Progress(BaseModel):
    """Progress through a session, recomputed on demand."""

    current_index: int
    total_items: int
    completed_items: int
    remaining_items: int
    percent_complete: float
    elapsed_seconds: float
    estimated_remaining_seconds: float

    def progress_text(self) -> str:
        return f"Exercise {self.current_index + 1} of {self.total_items}"


class Summary(BaseModel):
    """Outcome of a finished session.

    `was_completed` is True when the workout was completed and False when it
    was stopped early.
    """

    workout_title: str
    start_time: datetime
    end_time: datetime
    total_duration_seconds: float
    completed_exercises: int
    total_exercises: int
    was_completed: bool

    def formatted_duration(self) -> str:
        minutes, seconds = divmod(int(self.total_duration_seconds), 60)
        return f"{minutes}m {seconds}s"
