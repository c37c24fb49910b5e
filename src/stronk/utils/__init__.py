"""Utility functions for stronk."""

from .weights import equivalent_reps, one_rep_max, round_weight

__all__ = ["equivalent_reps", "one_rep_max", "round_weight"]
