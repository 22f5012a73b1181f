"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import load_settings


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Exit with an error unless ``progress-pals init`` has been run."""
    if not load_settings().db_path.exists():
        echo_error("No database yet. Run 'progress-pals init' first.")
        ctx.exit(1)


def _echo(tag: str, color: str, message: str, err: bool = False) -> None:
    click.echo(click.style(f"[{tag}] ", fg=color) + message, err=err)


def echo_success(message: str) -> None:
    _echo("OK", "green", message)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    _echo("ERROR", "red", message, err=True)


def echo_info(message: str) -> None:
    _echo("INFO", "blue", message)


def echo_warning(message: str) -> None:
    """Print a warning message to stderr."""
    _echo("WARN", "yellow", message, err=True)


def format_kg(value: float | None) -> str:
    """One-decimal kg string, ``N/A`` for missing values."""
    return "N/A" if value is None else f"{value:.1f} kg"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Left-aligned plain text table with a dashed rule under the headers."""
    if not rows:
        return ""

    cells = [list(headers)] + [[str(c) for c in row] for row in rows]
    widths = [max(len(col) for col in column) for column in zip(*cells)]
    gap = " " * padding

    def render(values: list[str]) -> str:
        return gap.join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    lines = [render(cells[0]), render(["-" * w for w in widths])]
    lines.extend(render(row) for row in cells[1:])
    return "\n".join(lines)
