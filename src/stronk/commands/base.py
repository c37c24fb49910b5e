"""Shared CLI utilities."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import wraps

import click

from ..config import get_settings
from ..data.routine_loader import load_routine
from ..db.engine import Database
from ..errors import InvalidWeightError, RoutineError
from ..models.weight import Weight, parse_pounds
from ..services.tracker import Tracker


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_settings().db_path
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Database not initialized. Run 'stronk init' first."
        )
        ctx.exit(1)


@asynccontextmanager
async def open_tracker(ctx: click.Context) -> AsyncIterator[Tracker]:
    """Open the configured database and routine for the span of one command."""
    settings = get_settings()
    try:
        routine = load_routine(settings.routine_file)
    except RoutineError as e:
        echo_error(str(e))
        ctx.exit(1)
    async with Database(settings.db_path) as db:
        yield Tracker(db, routine)


def weight_or_dash(weight: Weight | None) -> str:
    return str(weight) if weight is not None else "-"


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)


class WeightType(click.ParamType):
    """Click parameter for decimal pound strings like "177.5"."""

    name = "pounds"

    def convert(self, value, param, ctx):
        if isinstance(value, Weight):
            return value
        try:
            return parse_pounds(value)
        except InvalidWeightError as e:
            self.fail(str(e), param, ctx)


WEIGHT = WeightType()
