"""Training max commands."""

import click

from ..errors import StronkError
from .base import (
    WEIGHT,
    async_command,
    echo_error,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    open_tracker,
    weight_or_dash,
)


@click.group()
@click.pass_context
def tm(ctx):
    """View and set training maxes."""
    ensure_initialized(ctx)


@tm.command()
@click.pass_context
@async_command
async def show(ctx):
    """Show current training maxes and the smallest plate increment."""
    async with open_tracker(ctx) as tracker:
        tms, smallest_denom = await tracker.training_maxes()

    if not tms:
        echo_warning("No training maxes set. Set them with 'stronk tm set'")
    else:
        rows = [[t.exercise.display_name, str(t.max)] for t in tms]
        click.echo()
        click.echo(format_table(["Exercise", "Training max"], rows))
    click.echo()
    click.echo(f"Smallest denomination: {weight_or_dash(smallest_denom)}")


@tm.command(name="set")
@click.option("--press", required=True, type=WEIGHT, help="Overhead press training max")
@click.option("--squat", required=True, type=WEIGHT, help="Squat training max")
@click.option("--bench", required=True, type=WEIGHT, help="Bench press training max")
@click.option("--deadlift", required=True, type=WEIGHT, help="Deadlift training max")
@click.option("--smallest-denom", required=True, type=WEIGHT, help="Smallest weight increment you can load")
@click.pass_context
@async_command
async def set_maxes(ctx, press, squat, bench, deadlift, smallest_denom):
    """Set all four training maxes at once.

    Example:

        stronk tm set --press 127.5 --squat 230 --bench 190 --deadlift 280 --smallest-denom 2.5
    """
    async with open_tracker(ctx) as tracker:
        try:
            await tracker.set_training_maxes(press, squat, bench, deadlift, smallest_denom)
        except StronkError as e:
            echo_error(str(e))
            ctx.exit(1)
    echo_success("Training maxes updated")
