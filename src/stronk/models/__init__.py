"""Data models for stronk."""

from .lift import (
    MAIN_EXERCISES,
    ComparableLifts,
    Exercise,
    Lift,
    SetType,
    SkippedWeek,
    TrainingMax,
)
from .routine import Movement, Routine, Set, WorkoutDay, WorkoutWeek
from .weight import Weight, WeightUnit, parse_pounds, pounds

__all__ = [
    "ComparableLifts",
    "Exercise",
    "Lift",
    "MAIN_EXERCISES",
    "Movement",
    "parse_pounds",
    "pounds",
    "Routine",
    "Set",
    "SetType",
    "SkippedWeek",
    "TrainingMax",
    "Weight",
    "WeightUnit",
    "WorkoutDay",
    "WorkoutWeek",
]
