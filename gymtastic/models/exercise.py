"""Exercise catalog models.

Exercises are owned by the catalog. Workout entries only hold a reference to
one and the execution engine never looks inside it.
"""

from typing import Literal

from pydantic import BaseModel


MuscleGroup = Literal[
    "Chest",
    "Back",
    "Shoulders",
    "Biceps",
    "Triceps",
    "Legs",
    "Core",
    "Glutes",
    "Forearms",
    "Calves",
    "Full Body",
]


class Exercise(BaseModel):
    """A single physical exercise in the user's library."""

    id: str
    title: str
    description: str | None = None
    youtube_url: str | None = None
    muscle_groups: list[MuscleGroup] = []
