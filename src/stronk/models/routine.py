"""Routine definition models.

A routine is static configuration: weeks of days of movements of sets. It is
loaded once at startup and never modified; the resolver hands out filled-in
copies of a day's movements instead.
"""

from dataclasses import dataclass, field

from .lift import ComparableLifts, Exercise, SetType
from .weight import Weight


@dataclass
class Set:
    """A target set within a movement."""

    rep_target: int
    # A number between 0 and 100 indicating what portion of the training max
    # this set is going for.
    training_max_percentage: int
    to_failure: bool = False

    # Filled in on resolved copies only.
    weight_target: Weight | None = None
    failure_comparables: ComparableLifts | None = None
    associated_lift_id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "rep_target": self.rep_target,
            "training_max_percentage": self.training_max_percentage,
            "to_failure": self.to_failure,
            "weight_target": self.weight_target.to_dict() if self.weight_target else None,
            "failure_comparables": (
                self.failure_comparables.to_dict() if self.failure_comparables else None
            ),
            "associated_lift_id": self.associated_lift_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Set":
        """Create from a routine file entry."""
        return cls(
            rep_target=data["rep_target"],
            training_max_percentage=data["training_max_percentage"],
            to_failure=data.get("to_failure", False),
        )


@dataclass
class Movement:
    """An exercise performed as a run of sets of one type."""

    exercise: Exercise
    set_type: SetType
    sets: list[Set] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise": self.exercise.value,
            "set_type": self.set_type.value,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Movement":
        """Create from dictionary."""
        return cls(
            exercise=Exercise(data["exercise"]),
            set_type=SetType(data["set_type"]),
            sets=[Set.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass
class WorkoutDay:
    """A single training day."""

    day_name: str
    movements: list[Movement] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_name": self.day_name,
            "movements": [m.to_dict() for m in self.movements],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutDay":
        """Create from dictionary."""
        return cls(
            day_name=data["day_name"],
            movements=[Movement.from_dict(m) for m in data.get("movements", [])],
        )


@dataclass
class WorkoutWeek:
    """A week of training days.

    Optional weeks (e.g. a deload) can be skipped by the lifter.
    """

    week_name: str
    days: list[WorkoutDay] = field(default_factory=list)
    optional: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_name": self.week_name,
            "optional": self.optional,
            "days": [d.to_dict() for d in self.days],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutWeek":
        """Create from dictionary."""
        return cls(
            week_name=data["week_name"],
            days=[WorkoutDay.from_dict(d) for d in data.get("days", [])],
            optional=data.get("optional", False),
        )


@dataclass
class Routine:
    """The full multi-week program, repeated indefinitely."""

    name: str
    weeks: list[WorkoutWeek] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "weeks": [w.to_dict() for w in self.weeks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Routine":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            weeks=[WorkoutWeek.from_dict(w) for w in data.get("weeks", [])],
        )
