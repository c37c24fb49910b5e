"""Working out which set is due next.

The resolver is a pure function of the routine, the lift history, skipped
weeks, training maxes and the smallest weight denomination. It finds where
the most recent lift sits in the routine, replays that day's lifts against
the day's movements, and steps forward one set.

Matching recorded lifts to routine positions is a heuristic, not strict
validation: a lift that doesn't fit the current movement moves the replay on
to the next movement, and lifts that fit nowhere mark the whole day as done.
The latter can hide data-entry mistakes.
"""

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

import structlog

from ..errors import RoutinePositionError
from ..models.lift import Exercise, Lift, SkippedWeek, TrainingMax
from ..models.routine import Movement, Routine, WorkoutDay
from ..models.weight import Weight
from ..utils.weights import round_weight
from .comparables import calc_comparables

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Position:
    """A set's coordinates in the program timeline."""

    iteration: int
    week: int
    day: int
    movement: int = 0
    set: int = 0

    @property
    def day_key(self) -> tuple[int, int, int]:
        return (self.iteration, self.week, self.day)


@dataclass
class NextLift:
    """The next set due, along with the whole day's filled-in workout."""

    day_number: int
    week_number: int
    iteration_number: int
    day_name: str
    week_name: str
    workout: list[Movement]
    next_movement_index: int
    next_set_index: int
    # Set when this is the very start of an optional week, i.e. the lifter
    # can still choose to skip it.
    optional_week: bool = False

    @property
    def next_movement(self) -> Movement:
        return self.workout[self.next_movement_index]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {
            "day_number": self.day_number,
            "week_number": self.week_number,
            "iteration_number": self.iteration_number,
            "day_name": self.day_name,
            "week_name": self.week_name,
            "workout": [m.to_dict() for m in self.workout],
            "next_movement_index": self.next_movement_index,
            "next_set_index": self.next_set_index,
            "optional_week": self.optional_week,
        }


def lift_day_key(lift: Lift) -> tuple[int, int, int]:
    """Composite (iteration, week, day) index for a lift."""
    return (lift.iteration_number, lift.week_number, lift.day_number)


def sort_lifts(lifts: Iterable[Lift]) -> list[Lift]:
    """Sort lifts most recent first.

    IDs are assigned in insertion order, so they break ties within a day.
    """
    return sorted(
        lifts,
        key=lambda lift: (*lift_day_key(lift), lift.id or 0),
        reverse=True,
    )


def _workout_day(routine: Routine, pos: Position) -> WorkoutDay:
    if not 0 <= pos.week < len(routine.weeks):
        raise RoutinePositionError(
            f"week {pos.week} is outside the routine, which has {len(routine.weeks)} weeks"
        )
    week = routine.weeks[pos.week]
    if not 0 <= pos.day < len(week.days):
        raise RoutinePositionError(
            f"day {pos.day} is outside week {pos.week}, which has {len(week.days)} days"
        )
    return week.days[pos.day]


def _next_week(routine: Routine, pos: Position) -> Position:
    if pos.week + 1 < len(routine.weeks):
        return Position(iteration=pos.iteration, week=pos.week + 1, day=0)
    return Position(iteration=pos.iteration + 1, week=0, day=0)


def _next_day(routine: Routine, pos: Position) -> Position:
    if pos.day + 1 < len(routine.weeks[pos.week].days):
        return Position(iteration=pos.iteration, week=pos.week, day=pos.day + 1)
    return _next_week(routine, pos)


def _advance(routine: Routine, pos: Position) -> Position:
    """Step forward exactly one set."""
    day = routine.weeks[pos.week].days[pos.day]
    if pos.set + 1 < len(day.movements[pos.movement].sets):
        return replace(pos, set=pos.set + 1)
    if pos.movement + 1 < len(day.movements):
        return replace(pos, movement=pos.movement + 1, set=0)
    return _next_day(routine, pos)


def _replay_day(
    day: WorkoutDay, todays_lifts: list[Lift]
) -> tuple[tuple[int, int] | None, dict[tuple[int, int], int], int]:
    """Greedily assign the day's lifts, oldest first, to the day's sets.

    Returns the last (movement, set) completed, the lift ID that completed
    each set, and how many lifts couldn't be placed.
    """
    last: tuple[int, int] | None = None
    associations: dict[tuple[int, int], int] = {}
    idx = 0

    for mi, movement in enumerate(day.movements):
        for si in range(len(movement.sets)):
            if idx == len(todays_lifts):
                break
            lift = todays_lifts[idx]
            if lift.exercise != movement.exercise or lift.set_type != movement.set_type:
                break
            last = (mi, si)
            if lift.id is not None:
                associations[last] = lift.id
            idx += 1
        if idx == len(todays_lifts):
            break

    return last, associations, len(todays_lifts) - idx


def next_lift(
    routine: Routine,
    lifts: Iterable[Lift],
    skipped_weeks: Iterable[SkippedWeek] = (),
    training_maxes: Iterable[TrainingMax] = (),
    smallest_denom: Weight | None = None,
    failure_lifts: Mapping[Exercise, list[Lift]] | None = None,
) -> NextLift:
    """Compute the next set due.

    Args:
        routine: The routine being followed; never modified
        lifts: Lift history, in any order
        skipped_weeks: Optional weeks the lifter chose to skip
        training_maxes: Current training max per exercise
        smallest_denom: Smallest weight increment available, if configured
        failure_lifts: To-failure history per exercise, most recent first,
            used to attach comparables to to-failure sets

    Returns:
        The next set's position, with the day's movements copied and their
        target weights filled in where a training max is known.

    Raises:
        RoutinePositionError: The latest lift references a week or day the
            routine doesn't have.
    """
    history = sort_lifts(lifts)
    associations: dict[tuple[int, int], int] = {}

    if not history:
        seed = Position(iteration=0, week=0, day=0)
        pos = seed
    else:
        latest = history[0]
        seed = Position(
            iteration=latest.iteration_number,
            week=latest.week_number,
            day=latest.day_number,
        )
        day = _workout_day(routine, seed)

        todays_lifts = [lift for lift in reversed(history) if lift_day_key(lift) == seed.day_key]
        last, associations, unmatched = _replay_day(day, todays_lifts)

        if last is None or unmatched:
            logger.warning(
                "lifts_unmatched_day_complete",
                iteration=seed.iteration,
                week=seed.week,
                day=seed.day,
                unmatched=unmatched,
            )
            pos = _next_day(routine, seed)
        else:
            pos = _advance(routine, replace(seed, movement=last[0], set=last[1]))

    skipped = {(w.week, w.iteration) for w in skipped_weeks}
    while (pos.week, pos.iteration) in skipped:
        pos = _next_week(routine, pos)

    week = routine.weeks[pos.week]
    day = _workout_day(routine, pos)

    workout = copy.deepcopy(day.movements)
    _fill_targets(
        workout,
        {tm.exercise: tm.max for tm in training_maxes},
        smallest_denom,
        failure_lifts or {},
    )
    if pos.day_key == seed.day_key:
        for (mi, si), lift_id in associations.items():
            workout[mi].sets[si].associated_lift_id = lift_id

    return NextLift(
        day_number=pos.day,
        week_number=pos.week,
        iteration_number=pos.iteration,
        day_name=day.day_name,
        week_name=week.week_name,
        workout=workout,
        next_movement_index=pos.movement,
        next_set_index=pos.set,
        optional_week=week.optional and pos.day == 0 and pos.movement == 0 and pos.set == 0,
    )


def _fill_targets(
    workout: list[Movement],
    training_maxes: Mapping[Exercise, Weight],
    smallest_denom: Weight | None,
    failure_lifts: Mapping[Exercise, list[Lift]],
) -> None:
    if smallest_denom is None:
        return
    for movement in workout:
        tm = training_maxes.get(movement.exercise)
        if tm is None:
            continue
        for s in movement.sets:
            s.weight_target = round_weight(tm, s.training_max_percentage, smallest_denom)
            if s.to_failure:
                s.failure_comparables = calc_comparables(
                    failure_lifts.get(movement.exercise, []), s.weight_target
                )
