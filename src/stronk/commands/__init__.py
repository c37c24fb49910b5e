"""CLI commands for stronk."""

from .init import init
from .lifts import edit, lifts, next_lift, record, skip_week
from .serve import serve
from .training_maxes import tm

__all__ = [
    "edit",
    "init",
    "lifts",
    "next_lift",
    "record",
    "serve",
    "skip_week",
    "tm",
]
