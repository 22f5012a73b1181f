"""CLI entry point for progress-pals."""

import click

from . import __version__
from .commands import delete, goals, history, init, log_weight, profile, serve, stats
from .config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="progress-pals")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool):
    """progress-pals: personal weight tracking.

    Log your weight, set goals, and follow your BMI and 7-day trend.

    Example usage:

        # Initialize the project
        progress-pals init

        # Create your profile
        progress-pals profile set --height 170 --target 68

        # Log a weight and check your stats
        progress-pals log 72.4
        progress-pals stats --zones

        # Open the web dashboard
        progress-pals serve
    """
    configure_logging("DEBUG" if verbose else None)


main.add_command(init)
main.add_command(profile)
main.add_command(log_weight)
main.add_command(history)
main.add_command(delete)
main.add_command(stats)
main.add_command(goals)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
