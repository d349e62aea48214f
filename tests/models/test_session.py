"""Tests for session value types."""

from datetime import datetime, timedelta, timezone
import uuid

import pytest
from pydantic import ValidationError

from gymtastic.models import Progress, Session, Summary

START = datetime(2025, 10, 1, 9, 0, 0, tzinfo=timezone.utc)


def _session(workout, **update) -> Session:
    return Session(id=uuid.uuid4(), workout=workout, start_time=START, **update)


class TestSession:
    def test_defaults(self, workout_factory):
        session = _session(workout_factory.make())

        assert session.status == "active"
        assert session.current_item_index == 0
        assert session.completed_item_indices == ()
        assert session.current_set is None
        assert not session.is_terminal

    def test_is_frozen(self, workout_factory):
        session = _session(workout_factory.make())
        with pytest.raises(ValidationError):
            session.current_item_index = 1

    def test_current_entry(self, workout_factory):
        workout = workout_factory.make()
        assert _session(workout).current_entry == workout.ordered_sequence[0]
        assert _session(workout, current_item_index=2).current_entry is None

    @pytest.mark.parametrize(
        "status, terminal",
        [("active", False), ("paused", False), ("completed", True), ("stopped", True)],
    )
    def test_is_terminal(self, workout_factory, status, terminal):
        assert _session(workout_factory.make(), status=status).is_terminal is terminal

    def test_elapsed_seconds(self, workout_factory):
        session = _session(workout_factory.make())
        assert session.elapsed_seconds(START + timedelta(seconds=75)) == 75

    def test_elapsed_seconds_while_paused(self, workout_factory):
        session = _session(
            workout_factory.make(),
            status="paused",
            paused_at=START + timedelta(seconds=40),
        )
        assert session.elapsed_seconds(START + timedelta(hours=1)) == 40

    def test_set_break_countdown_requires_break(self, workout_factory):
        session = _session(
            workout_factory.make(),
            set_break_start_time=START,
            set_break_duration_seconds=60,
        )
        assert session.remaining_set_break_seconds(START) is None

    def test_regular_break_countdown_requires_break_entry(self, workout_factory):
        session = _session(workout_factory.make(), regular_break_start_time=START)
        assert session.remaining_regular_break_seconds(START) is None


def test_progress_text():
    progress = Progress(
        current_index=2,
        total_items=5,
        completed_items=2,
        remaining_items=3,
        percent_complete=0.4,
        elapsed_seconds=100.0,
        estimated_remaining_seconds=200.0,
    )
    assert progress.progress_text() == "Exercise 3 of 5"


def test_summary_formatted_duration():
    summary = Summary(
        workout_title="Push Day",
        start_time=START,
        end_time=START + timedelta(seconds=3725),
        total_duration_seconds=3725.0,
        completed_exercises=3,
        total_exercises=4,
        was_completed=False,
    )
    assert summary.formatted_duration() == "62m 5s"
