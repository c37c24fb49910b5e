"""Database layer for stronk."""

from .engine import Database, init_db
from .repositories import (
    LiftRepository,
    SkippedWeekRepository,
    SmallestDenomRepository,
    TrainingMaxRepository,
)

__all__ = [
    "Database",
    "init_db",
    "LiftRepository",
    "SkippedWeekRepository",
    "SmallestDenomRepository",
    "TrainingMaxRepository",
]
