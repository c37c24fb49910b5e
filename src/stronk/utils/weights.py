"""Weight arithmetic: 1RM estimates and rounding to usable increments."""

import math
from fractions import Fraction

from ..errors import UnitMismatchError
from ..models.lift import Lift
from ..models.weight import Weight

# Epley-style coefficient, roughly 1/30.
EPLEY_FACTOR = 0.0333333


def _check_units(a: Weight, b: Weight) -> None:
    if a.unit != b.unit:
        raise UnitMismatchError(f"mismatched units {a.unit!r} and {b.unit!r}")


def one_rep_max(lift: Lift) -> Weight:
    """Estimate a one-rep max from a lift's weight and reps.

    Truncates to a whole number of units. Zero reps returns the weight.
    """
    w = lift.weight
    if lift.reps == 0:
        return w
    return Weight(value=int(w.value + w.value * lift.reps * EPLEY_FACTOR), unit=w.unit)


def equivalent_reps(lift: Lift, target: Weight) -> float:
    """Reps at `target` that would give the same estimated 1RM as `lift`.

    Fractional results are meaningful as an estimate. A zero target has no
    answer and raises ZeroDivisionError.
    """
    _check_units(lift.weight, target)
    if target.value == 0:
        raise ZeroDivisionError("equivalent reps are undefined for a zero target weight")
    orm = one_rep_max(lift)
    return (orm.value / target.value - 1) / EPLEY_FACTOR


def round_weight(training_max: Weight, percent: int, increment: Weight) -> Weight:
    """Round `percent` of a training max to the nearest multiple of `increment`.

    Exact ties round up to the heavier weight.
    """
    _check_units(training_max, increment)
    if increment.value <= 0:
        raise ValueError(f"increment must be positive, was {increment.value}")

    target = Fraction(training_max.value * percent, 100)
    steps = target / increment.value
    lower = math.floor(steps) * increment.value
    upper = math.ceil(steps) * increment.value

    if target - lower < upper - target:
        return Weight(value=lower, unit=training_max.unit)
    return Weight(value=upper, unit=training_max.unit)
