"""Finding historical lifts to compare an upcoming to-failure set against."""

from ..models.lift import ComparableLifts, Lift
from ..models.weight import Weight
from ..utils.weights import equivalent_reps, one_rep_max


def calc_comparables(lifts: list[Lift], weight: Weight) -> ComparableLifts:
    """Find the closest-by-weight lift and the personal record.

    Args:
        lifts: To-failure lifts for one exercise, most recent first
        weight: The target weight of the upcoming set

    Returns:
        The closest lift by weight (ties go to the higher estimated 1RM),
        the lift with the highest estimated 1RM (ties go to the first one
        found), and how many reps the PR is worth at the target weight.
    """
    closest: Lift | None = None
    closest_diff = 0
    closest_orm = 0
    pr: Lift | None = None
    pr_orm = 0

    for lift in lifts:
        orm = one_rep_max(lift).value
        diff = abs(lift.weight.value - weight.value)

        if closest is None or diff < closest_diff or (diff == closest_diff and orm > closest_orm):
            closest, closest_diff, closest_orm = lift, diff, orm

        if pr is None or orm > pr_orm:
            pr, pr_orm = lift, orm

    pr_reps = 0.0
    # Equivalent reps are undefined at zero weight.
    if pr is not None and weight.value > 0:
        pr_reps = equivalent_reps(pr, weight)

    return ComparableLifts(
        closest_weight=closest,
        personal_record=pr,
        pr_equivalent_reps=pr_reps,
    )
