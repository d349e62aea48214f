"""Workout definition models.

A workout is authored as two lists, exercise entries and breaks, each entry
carrying its position in the sequence. The execution engine only ever reads
the merged, position-sorted view exposed by `WorkoutDefinition.ordered_sequence`.
"""

from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field, model_validator

from gymtastic.utils.formatting import format_duration
from .exercise import Exercise


ConfigurationType = Literal["repetitions", "time"]

# Heuristic used for duration estimates of rep-based sets.
SECONDS_PER_REP = 3


class ExerciseEntry(BaseModel):
    """An exercise placed in a workout, configured by reps or by time."""

    kind: Literal["exercise"] = "exercise"
    exercise: Exercise
    position: int = Field(ge=0)
    configuration_type: ConfigurationType
    # Rep-based configuration
    sets: int | None = Field(default=None, ge=1)
    reps_per_set: int | None = Field(default=None, ge=1)
    rest_between_sets_seconds: int | None = Field(default=None, ge=0)
    # Time-based configuration
    duration_seconds: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_configuration(self) -> Self:
        match self.configuration_type:
            case "repetitions":
                if self.sets is None or self.reps_per_set is None:
                    raise ValueError(
                        "Repetition exercises require both sets and reps_per_set"
                    )
            case "time":
                if self.duration_seconds is None:
                    raise ValueError("Timed exercises require duration_seconds")
        return self

    @property
    def is_multi_set(self) -> bool:
        """Whether the exercise is rep-based with more than one set."""
        return (
            self.configuration_type == "repetitions"
            and self.sets is not None
            and self.sets > 1
        )

    def estimated_duration_seconds(self) -> int:
        match self.configuration_type:
            case "repetitions":
                sets = self.sets or 1
                set_time = (self.reps_per_set or 0) * SECONDS_PER_REP
                rest_time = (self.rest_between_sets_seconds or 0) * sets
                return set_time * sets + rest_time
            case "time":
                return self.duration_seconds or 0

    def configuration_summary(self) -> str:
        """Short description such as `3 sets × 10 reps` or `45s`."""
        match self.configuration_type:
            case "repetitions":
                return f"{self.sets or 0} sets × {self.reps_per_set or 0} reps"
            case "time":
                return f"{self.duration_seconds or 0}s"


class BreakEntry(BaseModel):
    """A fixed-length rest period between exercises."""

    kind: Literal["break"] = "break"
    position: int = Field(ge=0)
    duration_seconds: int = Field(ge=1)

    def estimated_duration_seconds(self) -> int:
        return self.duration_seconds

    def formatted_duration(self) -> str:
        return format_duration(self.duration_seconds)


SequenceEntry = Annotated[ExerciseEntry | BreakEntry, Field(discriminator="kind")]


class WorkoutDefinition(BaseModel):
    """A complete training sequence created by the user.

    The engine treats a definition as read-only for the lifetime of a session.
    """

    title: str
    items: list[ExerciseEntry] = []
    breaks: list[BreakEntry] = []

    @model_validator(mode="after")
    def check_unique_positions(self) -> Self:
        positions = [entry.position for entry in self.items] + [
            entry.position for entry in self.breaks
        ]
        if len(positions) != len(set(positions)):
            raise ValueError("Sequence positions must be unique")
        return self

    @property
    def ordered_sequence(self) -> list[ExerciseEntry | BreakEntry]:
        """Exercises and breaks merged and sorted by position."""
        entries: list[ExerciseEntry | BreakEntry] = [*self.items, *self.breaks]
        return sorted(entries, key=lambda entry: entry.position)

    @property
    def estimated_duration_seconds(self) -> int:
        """Advisory total duration: every exercise estimate plus every break."""
        exercise_time = sum(item.estimated_duration_seconds() for item in self.items)
        break_time = sum(entry.duration_seconds for entry in self.breaks)
        return exercise_time + break_time

    @property
    def total_exercises(self) -> int:
        return len(self.items)

    def estimated_duration_formatted(self) -> str:
        return format_duration(self.estimated_duration_seconds)
