"""Data access layer for stronk."""

import aiosqlite

from ..errors import LiftNotFoundError, NoSmallestDenomError
from ..models.lift import (
    ComparableLifts,
    Exercise,
    Lift,
    SetType,
    SkippedWeek,
    TrainingMax,
)
from ..models.weight import Weight
from ..services.comparables import calc_comparables
from .engine import SQLITE_MAX_INT, Database

_LIFT_COLUMNS = """
    id, exercise, set_type, weight, set_number, reps, lift_note,
    day_number, week_number, iteration_number, to_failure
"""

# Most recent first; id breaks ties within a day since it follows insertion.
_LIFT_ORDER = "ORDER BY iteration_number DESC, week_number DESC, day_number DESC, id DESC"


def _row_to_lift(row: aiosqlite.Row) -> Lift:
    """Convert a database row to a Lift."""
    return Lift(
        id=row["id"],
        exercise=Exercise(row["exercise"]),
        set_type=SetType(row["set_type"]),
        weight=Weight.from_db(row["weight"]),
        set_number=row["set_number"],
        reps=row["reps"],
        note=row["lift_note"] or "",
        day_number=row["day_number"],
        week_number=row["week_number"],
        iteration_number=row["iteration_number"],
        to_failure=bool(row["to_failure"]),
    )


class LiftRepository:
    """Repository for recorded lifts."""

    def __init__(self, db: Database):
        self.db = db

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
    ) -> int:
        """Store a performed set and return its new ID."""
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO lifts
                (exercise, set_type, set_number, reps, weight,
                 day_number, week_number, iteration_number, lift_note, to_failure)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise.value,
                    set_type.value,
                    set_number,
                    reps,
                    weight.to_db(),
                    day,
                    week,
                    iteration,
                    note or None,
                    int(to_failure),
                ),
            )
            return cursor.lastrowid

    async def get(self, lift_id: int) -> Lift:
        """Get a lift by ID."""
        if not 0 <= lift_id <= SQLITE_MAX_INT:
            raise LiftNotFoundError(lift_id)
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                f"SELECT {_LIFT_COLUMNS} FROM lifts WHERE id = ?", (lift_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            raise LiftNotFoundError(lift_id)
        return _row_to_lift(row)

    async def edit(self, lift_id: int, note: str, reps: int) -> None:
        """Update the note and rep count of an existing lift."""
        if not 0 <= lift_id <= SQLITE_MAX_INT:
            raise LiftNotFoundError(lift_id)
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                "UPDATE lifts SET reps = ?, lift_note = ? WHERE id = ?",
                (reps, note or None, lift_id),
            )
            if cursor.rowcount == 0:
                raise LiftNotFoundError(lift_id)

    async def recent(self, limit: int = 100) -> list[Lift]:
        """Get the most recent lifts, most recent first."""
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                f"SELECT {_LIFT_COLUMNS} FROM lifts {_LIFT_ORDER} LIMIT ?", (limit,)
            )
            rows = await cursor.fetchall()
        return [_row_to_lift(row) for row in rows]

    async def failure_lifts(self, exercise: Exercise, limit: int = 250) -> list[Lift]:
        """Get to-failure lifts for an exercise, most recent first."""
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                f"""
                SELECT {_LIFT_COLUMNS} FROM lifts
                WHERE exercise = ? AND to_failure = 1
                {_LIFT_ORDER}
                LIMIT ?
                """,
                (exercise.value, limit),
            )
            rows = await cursor.fetchall()
        return [_row_to_lift(row) for row in rows]

    async def comparable_lifts(self, exercise: Exercise, weight: Weight) -> ComparableLifts:
        """Find the closest-weight and personal-record lifts for a target."""
        return calc_comparables(await self.failure_lifts(exercise), weight)


class TrainingMaxRepository:
    """Repository for training maxes."""

    def __init__(self, db: Database):
        self.db = db

    async def set_training_maxes(
        self, press: Weight, squat: Weight, bench: Weight, deadlift: Weight
    ) -> None:
        """Record a new training max for each of the main lifts."""
        async with self.db.transaction() as conn:
            await conn.executemany(
                "INSERT INTO training_maxes (exercise, training_max_weight) VALUES (?, ?)",
                [
                    (Exercise.OVERHEAD_PRESS.value, press.to_db()),
                    (Exercise.SQUAT.value, squat.to_db()),
                    (Exercise.BENCH_PRESS.value, bench.to_db()),
                    (Exercise.DEADLIFT.value, deadlift.to_db()),
                ],
            )

    async def current(self) -> list[TrainingMax]:
        """Get the latest training max for each exercise that has one."""
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                """
                SELECT exercise, training_max_weight
                FROM training_maxes
                WHERE id IN (SELECT MAX(id) FROM training_maxes GROUP BY exercise)
                ORDER BY id
                """
            )
            rows = await cursor.fetchall()
        return [
            TrainingMax(
                exercise=Exercise(row["exercise"]),
                max=Weight.from_db(row["training_max_weight"]),
            )
            for row in rows
        ]


class SmallestDenomRepository:
    """Repository for the smallest weight increment setting."""

    def __init__(self, db: Database):
        self.db = db

    async def set(self, weight: Weight) -> None:
        """Record a new smallest denomination."""
        async with self.db.transaction() as conn:
            await conn.execute(
                "INSERT INTO smallest_denom (smallest_denom) VALUES (?)",
                (weight.to_db(),),
            )

    async def get(self) -> Weight:
        """Get the current smallest denomination.

        Raises:
            NoSmallestDenomError: None has ever been set
        """
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                "SELECT smallest_denom FROM smallest_denom ORDER BY id DESC LIMIT 1"
            )
            row = await cursor.fetchone()
        if row is None:
            raise NoSmallestDenomError()
        return Weight.from_db(row["smallest_denom"])


class SkippedWeekRepository:
    """Repository for skipped optional weeks."""

    def __init__(self, db: Database):
        self.db = db

    async def list_all(self, limit: int = 100) -> list[SkippedWeek]:
        """Get the most recently skipped weeks."""
        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                """
                SELECT week_number, iteration_number, note
                FROM skipped_weeks
                ORDER BY iteration_number DESC, week_number DESC
                LIMIT ?
                """,
                (limit,),
            )
            rows = await cursor.fetchall()
        return [
            SkippedWeek(
                week=row["week_number"],
                iteration=row["iteration_number"],
                note=row["note"] or "",
            )
            for row in rows
        ]

    async def skip_week(self, note: str, week: int, iteration: int) -> None:
        """Record that a week was skipped."""
        async with self.db.transaction() as conn:
            await conn.execute(
                """
                INSERT INTO skipped_weeks (week_number, iteration_number, note)
                VALUES (?, ?, ?)
                """,
                (week, iteration, note),
            )
