"""Workout tracking actions: recording lifts, training maxes, skipping weeks."""

import structlog

from ..db.engine import SQLITE_MAX_INT, Database
from ..db.repositories import (
    LiftRepository,
    SkippedWeekRepository,
    SmallestDenomRepository,
    TrainingMaxRepository,
)
from ..errors import NoSmallestDenomError, ValidationError
from ..models.lift import MAIN_EXERCISES, ComparableLifts, Exercise, Lift, SetType, TrainingMax
from ..models.routine import Routine
from ..models.weight import Weight
from .next_lift import NextLift, next_lift

logger = structlog.get_logger(__name__)


def _check_in_range(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValidationError(f"{name} can't be negative, was {value}")
        if value > SQLITE_MAX_INT:
            raise ValidationError(f"{name} is too large, was {value}")


class Tracker:
    """Every action the lifter can take, backed by one database handle.

    The routine is read-only configuration, loaded once at startup.
    """

    def __init__(self, db: Database, routine: Routine):
        self.routine = routine
        self.lifts = LiftRepository(db)
        self.training_max_repo = TrainingMaxRepository(db)
        self.smallest_denom_repo = SmallestDenomRepository(db)
        self.skipped_week_repo = SkippedWeekRepository(db)

    async def smallest_denom(self) -> Weight | None:
        """The configured smallest denomination, or None if never set."""
        try:
            return await self.smallest_denom_repo.get()
        except NoSmallestDenomError:
            return None

    async def next_lift(self) -> NextLift:
        """Work out the next set due from everything recorded so far."""
        lifts = await self.lifts.recent()
        skipped = await self.skipped_week_repo.list_all()
        training_maxes = await self.training_max_repo.current()
        smallest_denom = await self.smallest_denom()
        if smallest_denom is None:
            logger.info("no_smallest_denom", detail="weight targets left empty")

        failure_lifts = {ex: await self.lifts.failure_lifts(ex) for ex in MAIN_EXERCISES}

        return next_lift(
            self.routine,
            lifts,
            skipped_weeks=skipped,
            training_maxes=training_maxes,
            smallest_denom=smallest_denom,
            failure_lifts=failure_lifts,
        )

    def _check_position(self, day: int, week: int, iteration: int) -> None:
        _check_in_range(day=day, week=week, iteration=iteration)
        if week >= len(self.routine.weeks):
            raise ValidationError(
                f"week {week} is outside the routine, which has {len(self.routine.weeks)} weeks"
            )
        days = len(self.routine.weeks[week].days)
        if day >= days:
            raise ValidationError(f"day {day} is outside week {week}, which has {days} days")

    async def record_lift(
        self,
        exercise: Exercise,
        set_type: SetType,
        weight: Weight,
        set_number: int,
        reps: int,
        note: str,
        day: int,
        week: int,
        iteration: int,
        to_failure: bool,
    ) -> tuple[int, NextLift]:
        """Record a completed set.

        Returns:
            The new lift's ID and the freshly resolved next set
        """
        _check_in_range(set_number=set_number, reps=reps)
        self._check_position(day, week, iteration)

        lift_id = await self.lifts.record_lift(
            exercise, set_type, weight, set_number, reps, note, day, week, iteration, to_failure
        )
        logger.info(
            "lift_recorded",
            lift_id=lift_id,
            exercise=exercise.value,
            set_type=set_type.value,
            weight=str(weight),
            reps=reps,
            position=(iteration, week, day, set_number),
        )
        return lift_id, await self.next_lift()

    async def get_lift(self, lift_id: int) -> Lift:
        return await self.lifts.get(lift_id)

    async def edit_lift(self, lift_id: int, note: str, reps: int) -> None:
        """Change the note and rep count of a recorded lift."""
        _check_in_range(reps=reps)
        await self.lifts.edit(lift_id, note, reps)
        logger.info("lift_edited", lift_id=lift_id, reps=reps)

    async def recent_lifts(self, limit: int = 100) -> list[Lift]:
        return await self.lifts.recent(limit)

    async def comparable_lifts(self, exercise: Exercise, weight: Weight) -> ComparableLifts:
        return await self.lifts.comparable_lifts(exercise, weight)

    async def training_maxes(self) -> tuple[list[TrainingMax], Weight | None]:
        """Current training maxes and smallest denomination."""
        return await self.training_max_repo.current(), await self.smallest_denom()

    async def set_training_maxes(
        self,
        press: Weight,
        squat: Weight,
        bench: Weight,
        deadlift: Weight,
        smallest_denom: Weight,
    ) -> None:
        """Replace the training maxes and smallest denomination."""
        if smallest_denom.value <= 0:
            raise ValidationError("smallest denomination must be greater than zero")

        await self.training_max_repo.set_training_maxes(press, squat, bench, deadlift)
        await self.smallest_denom_repo.set(smallest_denom)
        logger.info(
            "training_maxes_set",
            press=str(press),
            squat=str(squat),
            bench=str(bench),
            deadlift=str(deadlift),
            smallest_denom=str(smallest_denom),
        )

    async def skip_optional_week(self, week: int, iteration: int, note: str = "") -> NextLift:
        """Skip an optional week, e.g. a deload.

        Returns:
            The next set due after the skip
        """
        _check_in_range(week=week, iteration=iteration)
        if week >= len(self.routine.weeks):
            raise ValidationError(
                f"week {week} is outside the routine, which has {len(self.routine.weeks)} weeks"
            )
        if not self.routine.weeks[week].optional:
            raise ValidationError(f"week {week} ({self.routine.weeks[week].week_name}) isn't optional")

        await self.skipped_week_repo.skip_week(note, week, iteration)
        logger.info("week_skipped", week=week, iteration=iteration)
        return await self.next_lift()
