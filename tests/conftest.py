from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from gymtastic.app import env_loader  # noqa: F401
from gymtastic.execution import ExecutionEngine, SessionStore

from tests._factories import (
    BreakEntryFactory,
    ExerciseEntryFactory,
    ExerciseFactory,
    WorkoutFactory,
)


class FakeClock:
    """A clock that only moves when a test tells it to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 10, 1, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def engine(clock: FakeClock) -> ExecutionEngine:
    return ExecutionEngine(clock=clock)


@pytest.fixture(scope="session")
def exercise_factory() -> ExerciseFactory:
    return ExerciseFactory()


@pytest.fixture(scope="session")
def entry_factory() -> ExerciseEntryFactory:
    return ExerciseEntryFactory()


@pytest.fixture(scope="session")
def break_factory() -> BreakEntryFactory:
    return BreakEntryFactory()


@pytest.fixture(scope="session")
def workout_factory() -> WorkoutFactory:
    return WorkoutFactory()


@pytest.fixture
def client(engine: ExecutionEngine):
    """Test client sharing the fake-clock engine and a fresh session store."""
    from gymtastic.app.app import app
    from gymtastic.app.dependencies import (
        execution_engine,
        session_store,
        upcoming_entries_count,
    )

    store = SessionStore()
    app.dependency_overrides[execution_engine] = lambda: engine
    app.dependency_overrides[session_store] = lambda: store
    app.dependency_overrides[upcoming_entries_count] = lambda: 5
    yield TestClient(app)
    app.dependency_overrides.clear()
