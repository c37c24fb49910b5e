"""Recorded lifts and the records derived from them."""

from dataclasses import dataclass
from enum import Enum

from .weight import Weight


class Exercise(str, Enum):
    """The four main lifts."""

    OVERHEAD_PRESS = "OVERHEAD_PRESS"
    SQUAT = "SQUAT"
    BENCH_PRESS = "BENCH_PRESS"
    DEADLIFT = "DEADLIFT"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


# In the order they're trained through a week.
MAIN_EXERCISES = (
    Exercise.OVERHEAD_PRESS,
    Exercise.SQUAT,
    Exercise.BENCH_PRESS,
    Exercise.DEADLIFT,
)


class SetType(str, Enum):
    """Where a set falls within a workout."""

    WARMUP = "WARMUP"
    MAIN = "MAIN"
    ASSISTANCE = "ASSISTANCE"


@dataclass
class Lift:
    """A single performed set.

    Once recorded, only the note and rep count can change.
    """

    exercise: Exercise
    set_type: SetType
    weight: Weight
    set_number: int
    reps: int
    day_number: int
    week_number: int
    iteration_number: int
    note: str = ""
    to_failure: bool = False
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {
            "id": self.id,
            "exercise": self.exercise.value,
            "set_type": self.set_type.value,
            "weight": self.weight.to_dict(),
            "set_number": self.set_number,
            "reps": self.reps,
            "note": self.note,
            "day_number": self.day_number,
            "week_number": self.week_number,
            "iteration_number": self.iteration_number,
            "to_failure": self.to_failure,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Lift":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            exercise=Exercise(data["exercise"]),
            set_type=SetType(data["set_type"]),
            weight=Weight.from_dict(data["weight"]),
            set_number=data["set_number"],
            reps=data["reps"],
            note=data.get("note", ""),
            day_number=data["day_number"],
            week_number=data["week_number"],
            iteration_number=data["iteration_number"],
            to_failure=data.get("to_failure", False),
        )


@dataclass(frozen=True)
class TrainingMax:
    """The weight all percentage targets for an exercise are based on."""

    exercise: Exercise
    max: Weight

    def to_dict(self) -> dict:
        return {"exercise": self.exercise.value, "max": self.max.to_dict()}


@dataclass(frozen=True)
class SkippedWeek:
    """An optional week that was deliberately bypassed."""

    week: int
    iteration: int
    note: str = ""

    def to_dict(self) -> dict:
        return {"week": self.week, "iteration": self.iteration, "note": self.note}


@dataclass
class ComparableLifts:
    """Historical to-failure lifts worth comparing against a target.

    Never stored; computed when a to-failure set is coming up.
    """

    closest_weight: Lift | None = None
    personal_record: Lift | None = None
    pr_equivalent_reps: float = 0.0

    def to_dict(self) -> dict:
        return {
            "closest_weight": (
                self.closest_weight.to_dict() if self.closest_weight else None
            ),
            "personal_record": (
                self.personal_record.to_dict() if self.personal_record else None
            ),
            "pr_equivalent_reps": self.pr_equivalent_reps,
        }
