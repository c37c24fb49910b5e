"""Initialize database command."""

import click

from ..config import get_settings
from ..data.routine_loader import load_routine
from ..db import init_db
from ..errors import RoutineError
from .base import async_command, echo_error, echo_info, echo_success


@click.command()
@click.pass_context
@async_command
async def init(ctx):
    """Initialize the stronk database.

    Creates the data directory and the SQLite schema, and checks that the
    configured routine loads.
    """
    settings = get_settings()
    echo_info(f"Initializing stronk database at {settings.db_path}")

    try:
        routine = load_routine(settings.routine_file)
    except RoutineError as e:
        echo_error(str(e))
        ctx.exit(1)

    await init_db(settings.db_path)
    echo_success("Database initialized")
    echo_success(f"Routine loaded: {routine.name} ({len(routine.weeks)} weeks)")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set your training maxes:")
    click.echo(
        "     stronk tm set --press 127.5 --squat 230 --bench 190 --deadlift 280 "
        "--smallest-denom 2.5"
    )
    click.echo()
    click.echo("  2. See what's next:")
    click.echo("     stronk next")
