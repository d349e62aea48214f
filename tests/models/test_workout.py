"""Tests for workout definition models."""

import pytest
from pydantic import ValidationError

from gymtastic.models import BreakEntry, ExerciseEntry, WorkoutDefinition


class TestExerciseEntry:
    def test_repetitions_require_sets_and_reps(self, exercise_factory):
        with pytest.raises(ValidationError, match="sets and reps_per_set"):
            ExerciseEntry(
                exercise=exercise_factory.make(),
                position=0,
                configuration_type="repetitions",
                sets=3,
            )

    def test_time_requires_duration(self, exercise_factory):
        with pytest.raises(ValidationError, match="duration_seconds"):
            ExerciseEntry(
                exercise=exercise_factory.make(),
                position=0,
                configuration_type="time",
            )

    @pytest.mark.parametrize(
        "field, value",
        [("sets", 0), ("reps_per_set", 0), ("rest_between_sets_seconds", -1)],
    )
    def test_rejects_out_of_range_values(self, exercise_factory, field, value):
        config = {
            "exercise": exercise_factory.make(),
            "position": 0,
            "configuration_type": "repetitions",
            "sets": 3,
            "reps_per_set": 10,
        }
        config[field] = value
        with pytest.raises(ValidationError):
            ExerciseEntry(**config)

    def test_estimated_duration_repetitions(self, entry_factory):
        entry = entry_factory.reps(position=0, sets=3, reps_per_set=10, rest=60)
        # 3 sets of 10 reps at 3s each, plus 60s rest per set
        assert entry.estimated_duration_seconds() == 3 * 30 + 3 * 60

    def test_estimated_duration_time(self, entry_factory):
        assert entry_factory.timed(position=0, duration_seconds=45).estimated_duration_seconds() == 45

    def test_is_multi_set(self, entry_factory):
        assert entry_factory.reps(position=0, sets=2).is_multi_set
        assert not entry_factory.reps(position=0, sets=1).is_multi_set
        assert not entry_factory.timed(position=0).is_multi_set

    def test_configuration_summary(self, entry_factory):
        assert entry_factory.reps(position=0, sets=3, reps_per_set=12).configuration_summary() == "3 sets × 12 reps"
        assert entry_factory.timed(position=0, duration_seconds=30).configuration_summary() == "30s"


class TestBreakEntry:
    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            BreakEntry(position=0, duration_seconds=0)

    def test_formatted_duration(self, break_factory):
        assert break_factory.make({"duration_seconds": 90}).formatted_duration() == "1m 30s"
        assert break_factory.make({"duration_seconds": 45}).formatted_duration() == "45s"


class TestWorkoutDefinition:
    def test_ordered_sequence_merges_by_position(
        self, workout_factory, entry_factory, break_factory
    ):
        workout = workout_factory.make(
            items=[entry_factory.reps(position=2), entry_factory.reps(position=0)],
            breaks=[break_factory.make({"position": 1})],
        )

        sequence = workout.ordered_sequence

        assert [entry.position for entry in sequence] == [0, 1, 2]
        assert [entry.kind for entry in sequence] == ["exercise", "break", "exercise"]

    def test_duplicate_positions_rejected(self, entry_factory, break_factory):
        with pytest.raises(ValidationError, match="unique"):
            WorkoutDefinition(
                title="Clash",
                items=[entry_factory.reps(position=0)],
                breaks=[break_factory.make({"position": 0})],
            )

    def test_estimated_duration(self, workout_factory, entry_factory, break_factory):
        workout = workout_factory.make(
            items=[
                entry_factory.reps(position=0, sets=3, reps_per_set=10, rest=60),
                entry_factory.timed(position=2, duration_seconds=45),
            ],
            breaks=[break_factory.make({"position": 1, "duration_seconds": 30})],
        )

        assert workout.estimated_duration_seconds == 270 + 45 + 30
        assert workout.estimated_duration_formatted() == "5m 45s"

    def test_total_exercises_counts_items_only(
        self, workout_factory, break_factory
    ):
        workout = workout_factory.make(breaks=[break_factory.make({"position": 5})])
        assert workout.total_exercises == 2
        assert len(workout.ordered_sequence) == 3

    def test_parses_json(self):
        workout = WorkoutDefinition.model_validate(
            {
                "title": "Legs",
                "items": [
                    {
                        "exercise": {"id": "squat", "title": "Squat", "muscle_groups": ["Legs"]},
                        "position": 0,
                        "configuration_type": "repetitions",
                        "sets": 4,
                        "reps_per_set": 8,
                        "rest_between_sets_seconds": 90,
                    }
                ],
                "breaks": [{"position": 1, "duration_seconds": 120}],
            }
        )

        assert isinstance(workout.ordered_sequence[0], ExerciseEntry)
        assert isinstance(workout.ordered_sequence[1], BreakEntry)
        assert workout.items[0].exercise.muscle_groups == ["Legs"]

    def test_rejects_unknown_muscle_group(self):
        with pytest.raises(ValidationError):
            WorkoutDefinition.model_validate(
                {
                    "title": "Bad",
                    "items": [
                        {
                            "exercise": {"id": "x", "title": "X", "muscle_groups": ["Wings"]},
                            "position": 0,
                            "configuration_type": "time",
                            "duration_seconds": 30,
                        }
                    ],
                }
            )
