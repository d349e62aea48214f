from .workout import (
    ExerciseFactory,
    ExerciseEntryFactory,
    BreakEntryFactory,
    WorkoutFactory,
)

__all__ = [
    "ExerciseFactory",
    "ExerciseEntryFactory",
    "BreakEntryFactory",
    "WorkoutFactory",
]
