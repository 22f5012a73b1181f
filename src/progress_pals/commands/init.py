"""Initialize project command."""

import click

from ..data.quote_loader import seed_quotes
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the progress-pals database.

    Creates the data directory, the SQLite schema and the quote library.
    Safe to run more than once.
    """
    db_path = get_db_path()
    echo_info(f"Initializing progress-pals in {db_path.parent}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_quotes(db_path)
    if count:
        echo_success(f"Quote library populated ({count} quotes)")

    click.echo()
    click.echo("progress-pals is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set up your profile:")
    click.echo("     progress-pals profile set")
    click.echo()
    click.echo("  2. Log your weight:")
    click.echo("     progress-pals log 72.5")
    click.echo()
    click.echo("  3. Open the dashboard:")
    click.echo("     progress-pals serve")
