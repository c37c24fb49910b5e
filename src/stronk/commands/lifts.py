"""Lift commands: what's next, recording, editing and skipping weeks."""

import click

from ..errors import StronkError
from ..models.lift import Exercise, SetType
from ..services.next_lift import NextLift
from .base import (
    WEIGHT,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    open_tracker,
    weight_or_dash,
)

EXERCISE_CHOICE = click.Choice([e.value for e in Exercise], case_sensitive=False)
SET_TYPE_CHOICE = click.Choice([t.value for t in SetType], case_sensitive=False)


def print_next_lift(nxt: NextLift) -> None:
    """Print the day's workout with the next set marked."""
    click.echo()
    click.echo(
        click.style(f"{nxt.week_name} - {nxt.day_name}", bold=True)
        + f"  (iteration {nxt.iteration_number}, week {nxt.week_number}, day {nxt.day_number})"
    )
    if nxt.optional_week:
        echo_info(
            f"This week is optional. Skip it with: "
            f"stronk skip-week {nxt.week_number} {nxt.iteration_number}"
        )
    click.echo()

    headers = ["", "Exercise", "Type", "Set", "Reps", "Weight", "Lift ID"]
    rows = []
    for m_idx, movement in enumerate(nxt.workout):
        for s_idx, s in enumerate(movement.sets):
            is_next = (m_idx, s_idx) == (nxt.next_movement_index, nxt.next_set_index)
            reps = f"{s.rep_target}+" if s.to_failure else str(s.rep_target)
            rows.append([
                "->" if is_next else "",
                movement.exercise.display_name,
                movement.set_type.value.lower(),
                str(s_idx),
                reps,
                weight_or_dash(s.weight_target),
                str(s.associated_lift_id) if s.associated_lift_id is not None else "",
            ])
    click.echo(format_table(headers, rows))

    current = nxt.next_movement.sets[nxt.next_set_index]
    comps = current.failure_comparables
    if comps is not None and comps.personal_record is not None:
        pr = comps.personal_record
        click.echo()
        click.echo(
            f"PR: {pr.weight} x {pr.reps}. "
            f"Beat it with {comps.pr_equivalent_reps:.1f}+ reps at {current.weight_target}."
        )
    click.echo()


@click.command(name="next")
@click.pass_context
@async_command
async def next_lift(ctx):
    """Show the next set due and the rest of today's workout."""
    ensure_initialized(ctx)
    async with open_tracker(ctx) as tracker:
        try:
            nxt = await tracker.next_lift()
        except StronkError as e:
            echo_error(str(e))
            ctx.exit(1)
    print_next_lift(nxt)


@click.command()
@click.argument("exercise", type=EXERCISE_CHOICE)
@click.argument("set_type", type=SET_TYPE_CHOICE)
@click.argument("weight", type=WEIGHT)
@click.option("--set", "set_number", required=True, type=int, help="Set index within the movement")
@click.option("--reps", "-r", required=True, type=int, help="Reps completed")
@click.option("--day", required=True, type=int, help="Day index within the week")
@click.option("--week", required=True, type=int, help="Week index within the routine")
@click.option("--iteration", required=True, type=int, help="Pass through the routine")
@click.option("--note", "-n", default="", help="Free-text note")
@click.option("--to-failure", is_flag=True, help="The set was taken to failure")
@click.pass_context
@async_command
async def record(
    ctx,
    exercise: str,
    set_type: str,
    weight,
    set_number: int,
    reps: int,
    day: int,
    week: int,
    iteration: int,
    note: str,
    to_failure: bool,
):
    """Record a completed set.

    Example:

        stronk record OVERHEAD_PRESS WARMUP 50 --set 0 --reps 5 --day 0 --week 0 --iteration 0
    """
    ensure_initialized(ctx)
    async with open_tracker(ctx) as tracker:
        try:
            lift_id, nxt = await tracker.record_lift(
                exercise=Exercise(exercise.upper()),
                set_type=SetType(set_type.upper()),
                weight=weight,
                set_number=set_number,
                reps=reps,
                note=note,
                day=day,
                week=week,
                iteration=iteration,
                to_failure=to_failure,
            )
        except StronkError as e:
            echo_error(str(e))
            ctx.exit(1)

    echo_success(f"Recorded lift {lift_id}: {weight} x {reps}")
    print_next_lift(nxt)


@click.command()
@click.argument("lift_id", type=int)
@click.option("--reps", "-r", required=True, type=int, help="Corrected rep count")
@click.option("--note", "-n", default="", help="Replacement note")
@click.pass_context
@async_command
async def edit(ctx, lift_id: int, reps: int, note: str):
    """Change the reps and note of a recorded lift."""
    ensure_initialized(ctx)
    async with open_tracker(ctx) as tracker:
        try:
            await tracker.edit_lift(lift_id, note, reps)
        except StronkError as e:
            echo_error(str(e))
            ctx.exit(1)
    echo_success(f"Updated lift {lift_id}")


@click.command(name="skip-week")
@click.argument("week", type=int)
@click.argument("iteration", type=int)
@click.option("--note", "-n", default="", help="Why the week was skipped")
@click.pass_context
@async_command
async def skip_week(ctx, week: int, iteration: int, note: str):
    """Skip an optional week, such as a deload."""
    ensure_initialized(ctx)
    async with open_tracker(ctx) as tracker:
        try:
            nxt = await tracker.skip_optional_week(week, iteration, note)
        except StronkError as e:
            echo_error(str(e))
            ctx.exit(1)

    echo_success(f"Skipped week {week} of iteration {iteration}")
    print_next_lift(nxt)


@click.command()
@click.option(
    "--limit", "-l", default=20, type=click.IntRange(1, 1000), help="How many lifts to show"
)
@click.pass_context
@async_command
async def lifts(ctx, limit: int):
    """List recently recorded lifts."""
    ensure_initialized(ctx)
    async with open_tracker(ctx) as tracker:
        recent = await tracker.recent_lifts(limit)

    if not recent:
        echo_info("No lifts recorded yet. See what's due with 'stronk next'")
        return

    headers = ["ID", "Exercise", "Type", "Weight", "Reps", "Position", "Note"]
    rows = []
    for lift in recent:
        reps = f"{lift.reps}+" if lift.to_failure else str(lift.reps)
        rows.append([
            str(lift.id),
            lift.exercise.display_name,
            lift.set_type.value.lower(),
            str(lift.weight),
            reps,
            f"{lift.iteration_number}/{lift.week_number}/{lift.day_number}/{lift.set_number}",
            lift.note[:30] + "..." if len(lift.note) > 30 else lift.note,
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(recent)} lift(s)")
