"""CLI entry point for stronk."""

import click

from . import __version__
from .commands import edit, init, lifts, next_lift, record, serve, skip_week, tm
from .config import get_settings
from .logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="stronk")
def main():
    """stronk: a 5/3/1 workout tracker.

    Works out which set is due next from the lifts you've recorded, with
    weights rounded to what you can actually load on the bar.

    Example usage:

        # Initialize the database
        stronk init

        # Set training maxes
        stronk tm set --press 127.5 --squat 230 --bench 190 --deadlift 280 --smallest-denom 2.5

        # See what's next, then record it
        stronk next
        stronk record OVERHEAD_PRESS WARMUP 50 --set 0 --reps 5 --day 0 --week 0 --iteration 0
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(next_lift)
main.add_command(record)
main.add_command(edit)
main.add_command(skip_week)
main.add_command(tm)
main.add_command(lifts)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
