"""Workout execution engine.

Turns a read-only `WorkoutDefinition` into a live `Session` and moves it
through the workout. The engine holds no session state of its own: every
operation takes the latest `Session` snapshot and returns a new one (or a
`Summary` once the session ends). Time is read from an injectable clock so
countdowns can be computed on demand instead of being ticked.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from gymtastic.models import (
    BreakEntry,
    ExerciseEntry,
    Progress,
    Session,
    SequenceEntry,
    Summary,
    WorkoutDefinition,
)
from .errors import CannotAdvanceError, SessionNotActiveError, WorkoutNotValidError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExecutionEngine:
    """Pure state transitions over `Session` values."""

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    # --- Execution control ---

    def start(self, workout: WorkoutDefinition) -> Session:
        """Start a new session at the first entry of the workout.

        Raises:
            WorkoutNotValidError: If the workout has no exercise entries.
                Breaks alone do not make a workout valid.
        """
        if not workout.items:
            logger.warning("Refusing to start workout %r: no exercises", workout.title)
            raise WorkoutNotValidError(workout.title)

        now = self.clock()
        session = Session(id=uuid.uuid4(), workout=workout, start_time=now)
        session = self._enter_current_entry(session, now)
        logger.info(
            f"Started session {session.id} for workout {workout.title!r} "
            f"({len(workout.ordered_sequence)} entries)"
        )
        return session

    def advance(self, session: Session) -> Session:
        """Move the session one step forward.

        The checks run in a fixed order:
        1. A running set break ends and the next set begins.
        2. A finished set that is not the last one of a multi-set exercise
           starts the rest between sets, or the next set if no rest is set.
        3. Anything else finishes the current entry and moves to the next one.

        Raises:
            SessionNotActiveError: If the session is not active.
            CannotAdvanceError: If the session is already past the last entry.
        """
        if session.status != "active":
            logger.warning(
                f"Cannot advance session {session.id} with status {session.status}"
            )
            raise SessionNotActiveError(session.status)

        now = self.clock()

        if session.is_on_set_break:
            next_set = session.current_set + 1 if session.current_set is not None else None
            logger.debug(f"Session {session.id}: set break over, starting set {next_set}")
            return session.model_copy(
                update={
                    "is_on_set_break": False,
                    "set_break_start_time": None,
                    "set_break_duration_seconds": None,
                    "current_set": next_set,
                }
            )

        entry = session.current_entry
        current_set = session.current_set
        match entry:
            case ExerciseEntry(configuration_type="repetitions", sets=int() as sets) if (
                current_set is not None and current_set < sets
            ):
                rest = entry.rest_between_sets_seconds
                if rest is not None and rest > 0:
                    logger.debug(
                        f"Session {session.id}: set {current_set} done, resting {rest}s"
                    )
                    return session.model_copy(
                        update={
                            "is_on_set_break": True,
                            "set_break_start_time": now,
                            "set_break_duration_seconds": rest,
                        }
                    )
                logger.debug(f"Session {session.id}: set {current_set} done, no rest")
                return session.model_copy(update={"current_set": current_set + 1})

        total_items = len(session.workout.ordered_sequence)
        next_index = session.current_item_index + 1
        if next_index > total_items:
            logger.warning(
                f"Session {session.id} cannot advance past entry {total_items - 1}"
            )
            raise CannotAdvanceError(f"index {next_index} of {total_items}")

        moved = session.model_copy(
            update={
                "completed_item_indices": (
                    *session.completed_item_indices,
                    session.current_item_index,
                ),
                "current_item_index": next_index,
                "current_set": None,
                "is_on_set_break": False,
                "set_break_start_time": None,
                "set_break_duration_seconds": None,
                "regular_break_start_time": None,
            }
        )
        logger.debug(f"Session {session.id}: moved to entry {next_index}/{total_items}")
        return self._enter_current_entry(moved, now)

    def pause(self, session: Session) -> Session:
        """Pause the session, freezing its elapsed time.

        Set-break and regular-break countdowns are not frozen; they keep
        following the wall clock.
        """
        if session.is_terminal or session.status == "paused":
            return session
        logger.info(f"Paused session {session.id}")
        return session.model_copy(update={"status": "paused", "paused_at": self.clock()})

    def resume(self, session: Session) -> Session:
        if session.is_terminal:
            return session
        logger.info(f"Resumed session {session.id}")
        return session.model_copy(update={"status": "active", "paused_at": None})

    def stop(self, session: Session) -> Summary:
        """End the session early. Only exercises actually passed are counted."""
        summary = self._summarize(
            session,
            completed_exercises=self._count_completed_exercises(session),
            was_completed=False,
        )
        logger.info(
            f"Stopped session {session.id} after {summary.completed_exercises}"
            f"/{summary.total_exercises} exercises"
        )
        return summary

    def complete(self, session: Session) -> Summary:
        """Finish the session, reporting every exercise as completed.

        Callers are expected to check `is_complete` first; the engine does not.
        """
        total = session.workout.total_exercises
        summary = self._summarize(session, completed_exercises=total, was_completed=True)
        logger.info(f"Completed session {session.id} ({total} exercises)")
        return summary

    # --- Queries ---

    def progress(self, session: Session) -> Progress:
        total_items = len(session.workout.ordered_sequence)
        completed_items = len(session.completed_item_indices)
        elapsed = session.elapsed_seconds(self.clock())
        estimated_total = float(session.workout.estimated_duration_seconds)
        return Progress(
            current_index=session.current_item_index,
            total_items=total_items,
            completed_items=completed_items,
            remaining_items=total_items - session.current_item_index,
            percent_complete=completed_items / total_items if total_items > 0 else 0.0,
            elapsed_seconds=elapsed,
            estimated_remaining_seconds=max(0.0, estimated_total - elapsed),
        )

    def upcoming_entries(self, session: Session, count: int) -> list[SequenceEntry]:
        """Up to `count` entries following the current one."""
        sequence = session.workout.ordered_sequence
        start = session.current_item_index + 1
        if start >= len(sequence):
            return []
        return sequence[start : min(start + count, len(sequence))]

    def is_complete(self, session: Session) -> bool:
        return session.current_item_index >= len(session.workout.ordered_sequence)

    def remaining_set_break_seconds(self, session: Session) -> int | None:
        return session.remaining_set_break_seconds(self.clock())

    def remaining_regular_break_seconds(self, session: Session) -> int | None:
        return session.remaining_regular_break_seconds(self.clock())

    # --- Helpers ---

    def _enter_current_entry(self, session: Session, now: datetime) -> Session:
        """Initialise per-entry tracking for the entry the session just reached."""
        match session.current_entry:
            case ExerciseEntry() as entry if entry.is_multi_set:
                return session.model_copy(update={"current_set": 1})
            case BreakEntry():
                return session.model_copy(update={"regular_break_start_time": now})
            case _:
                return session

    def _count_completed_exercises(self, session: Session) -> int:
        sequence = session.workout.ordered_sequence
        return sum(
            1
            for index in session.completed_item_indices
            if index < len(sequence) and isinstance(sequence[index], ExerciseEntry)
        )

    def _summarize(
        self, session: Session, completed_exercises: int, was_completed: bool
    ) -> Summary:
        end_time = self.clock()
        return Summary(
            workout_title=session.workout.title,
            start_time=session.start_time,
            end_time=end_time,
            total_duration_seconds=(end_time - session.start_time).total_seconds(),
            completed_exercises=completed_exercises,
            total_exercises=session.workout.total_exercises,
            was_completed=was_completed,
        )
