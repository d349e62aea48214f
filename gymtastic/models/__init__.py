from .exercise import Exercise, MuscleGroup
from .workout import (
    BreakEntry,
    ConfigurationType,
    ExerciseEntry,
    SequenceEntry,
    WorkoutDefinition,
    SECONDS_PER_REP,
)
from .session import Session, SessionStatus, Progress, Summary

__all__ = [
    "Exercise",
    "MuscleGroup",
    "BreakEntry",
    "ConfigurationType",
    "ExerciseEntry",
    "SequenceEntry",
    "WorkoutDefinition",
    "SECONDS_PER_REP",
    "Session",
    "SessionStatus",
    "Progress",
    "Summary",
]
