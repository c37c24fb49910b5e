"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from stronk.config import Settings
from stronk.data.routine_loader import load_routine
from stronk.db.engine import Database
from stronk.models.lift import Exercise, Lift, SetType
from stronk.models.routine import Movement, Routine, Set, WorkoutDay, WorkoutWeek
from stronk.models.weight import pounds
from stronk.services.tracker import Tracker


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def test_settings(temp_db_path):
    """Settings pointing at a temporary database."""
    return Settings(
        data_dir=temp_db_path.parent,
        db_file=temp_db_path,
        log_level="WARNING",
    )


@pytest.fixture
def routine():
    """The bundled 5/3/1 routine."""
    return load_routine()


@pytest.fixture
def small_routine():
    """A two-week routine small enough to walk through by hand.

    Week 0 has a squat day (warmup x2, main x2 with the last to failure)
    and a bench day (main x1). Week 1 is an optional deload with a single
    squat day of two sets.
    """
    return Routine(
        name="Small",
        weeks=[
            WorkoutWeek(
                week_name="Week A",
                days=[
                    WorkoutDay(
                        day_name="Squat Day",
                        movements=[
                            Movement(
                                exercise=Exercise.SQUAT,
                                set_type=SetType.WARMUP,
                                sets=[Set(5, 50), Set(5, 60)],
                            ),
                            Movement(
                                exercise=Exercise.SQUAT,
                                set_type=SetType.MAIN,
                                sets=[Set(5, 80), Set(5, 90, to_failure=True)],
                            ),
                        ],
                    ),
                    WorkoutDay(
                        day_name="Bench Day",
                        movements=[
                            Movement(
                                exercise=Exercise.BENCH_PRESS,
                                set_type=SetType.MAIN,
                                sets=[Set(5, 80)],
                            ),
                        ],
                    ),
                ],
            ),
            WorkoutWeek(
                week_name="Deload",
                optional=True,
                days=[
                    WorkoutDay(
                        day_name="Squat Day",
                        movements=[
                            Movement(
                                exercise=Exercise.SQUAT,
                                set_type=SetType.MAIN,
                                sets=[Set(5, 40), Set(5, 50)],
                            ),
                        ],
                    ),
                ],
            ),
        ],
    )


def _make_lift(
    lift_id: int,
    exercise: Exercise,
    set_type: SetType,
    set_number: int = 0,
    day: int = 0,
    week: int = 0,
    iteration: int = 0,
    weight: int = 1000,
    reps: int = 5,
    to_failure: bool = False,
) -> Lift:
    """Build a lift with sensible defaults; weight is in deci-pounds."""
    return Lift(
        id=lift_id,
        exercise=exercise,
        set_type=set_type,
        weight=pounds(weight),
        set_number=set_number,
        reps=reps,
        day_number=day,
        week_number=week,
        iteration_number=iteration,
        to_failure=to_failure,
    )


@pytest.fixture
def sample_failure_lifts():
    """Squat to-failure history, most recent first."""
    return [
        _make_lift(3, Exercise.SQUAT, SetType.MAIN, weight=900, reps=10, to_failure=True),
        _make_lift(2, Exercise.SQUAT, SetType.MAIN, weight=1100, reps=3, to_failure=True),
        _make_lift(1, Exercise.SQUAT, SetType.MAIN, weight=1000, reps=5, to_failure=True),
    ]


@pytest.fixture
async def db(temp_db_path):
    """An open database on a temporary file."""
    async with Database(temp_db_path) as database:
        yield database


@pytest.fixture
async def tracker(db, routine):
    """A tracker over a fresh database and the bundled routine."""
    return Tracker(db, routine)


@pytest.fixture
def make_lift():
    """Factory for lifts; see _make_lift for defaults."""
    return _make_lift
