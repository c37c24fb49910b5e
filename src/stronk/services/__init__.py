"""Services for stronk."""

from .comparables import calc_comparables
from .next_lift import NextLift, next_lift

__all__ = ["calc_comparables", "NextLift", "next_lift"]
