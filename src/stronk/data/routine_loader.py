"""Routine loader from JSON."""

import json
from pathlib import Path

import structlog

from ..errors import RoutineError
from ..models.routine import Routine

logger = structlog.get_logger(__name__)


def get_default_routine_path() -> Path:
    """Get the path to the bundled 5/3/1 routine."""
    return Path(__file__).parent / "routine.json"


def validate_routine(routine: Routine) -> None:
    """Check a routine is complete enough to walk through.

    Every week needs a day, every day a movement, every movement a set, and
    every percentage must be between 0 and 100.
    """
    if not routine.weeks:
        raise RoutineError(f"routine {routine.name!r} has no weeks")

    for wi, week in enumerate(routine.weeks):
        if not week.days:
            raise RoutineError(f"week {wi} ({week.week_name!r}) has no days")
        for di, day in enumerate(week.days):
            if not day.movements:
                raise RoutineError(f"week {wi}, day {di} ({day.day_name!r}) has no movements")
            for mi, movement in enumerate(day.movements):
                if not movement.sets:
                    raise RoutineError(f"week {wi}, day {di}, movement {mi} has no sets")
                for s in movement.sets:
                    if not 0 <= s.training_max_percentage <= 100:
                        raise RoutineError(
                            f"week {wi}, day {di}, movement {mi} has a set at "
                            f"{s.training_max_percentage}% of training max"
                        )
                    if s.rep_target < 0:
                        raise RoutineError(
                            f"week {wi}, day {di}, movement {mi} has a negative rep target"
                        )


def load_routine(path: Path | None = None) -> Routine:
    """Load and validate a routine file.

    Args:
        path: Routine JSON file. Uses the bundled routine if not provided.

    Returns:
        The parsed routine
    """
    if path is None:
        path = get_default_routine_path()

    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise RoutineError(f"failed to open routine file {str(path)!r}: {e}") from e
    except json.JSONDecodeError as e:
        raise RoutineError(f"failed to parse routine file {str(path)!r} as JSON: {e}") from e

    try:
        routine = Routine.from_dict(data)
    except (KeyError, ValueError, TypeError) as e:
        raise RoutineError(f"invalid routine in {str(path)!r}: {e}") from e

    validate_routine(routine)
    logger.info("routine_loaded", name=routine.name, weeks=len(routine.weeks), path=str(path))
    return routine
