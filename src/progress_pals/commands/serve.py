"""Web server command."""

import click

from ..config import load_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", "-p", default=8000, show_default=True, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Restart on code changes (development)")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Run the web dashboard.

    Until a profile exists every page redirects to the onboarding form.

    Examples:

        progress-pals serve

        progress-pals serve --port 3000 --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = load_settings()
    click.echo(click.style("progress-pals dashboard", fg="green", bold=True))
    click.echo(f"  URL:  http://{host}:{port}")
    click.echo(f"  Data: {settings.db_path}")
    click.echo("Press Ctrl+C to stop.")

    uvicorn.run(
        "progress_pals.web:create_app" if reload else create_app(),
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
