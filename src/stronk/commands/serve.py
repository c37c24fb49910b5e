"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: STRONK_HOST or 127.0.0.1)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: STRONK_PORT or 8080)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the web server.

    Serves the JSON API (and the frontend, if STRONK_FRONTEND_DIR is set).

    Examples:

        # Start on the configured port
        stronk serve

        # Expose to network (all interfaces)
        stronk serve --host 0.0.0.0
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting stronk web server...", fg="green"))
    click.echo()
    click.echo(f"  API:  http://{host}:{port}/api/nextLift")
    click.echo(f"  Docs: http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        "stronk.web:create_app" if reload else create_app(settings),
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_config=None,
    )
