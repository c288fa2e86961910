"""Utility functions for the CLI interface."""

from functools import wraps

import click
from garage.services.loader_service import MalformedInputError


def format_price(value: float) -> str:
    """Format an amount of money for display."""
    return f"${value:,.2f}"


def fixture_option(help_text: str):
    """Option pointing a command at a fixture file other than the configured one."""
    return click.option(
        "--file", "path",
        type=click.Path(dir_okay=False),
        default=None,
        help=help_text,
    )


def handle_load_errors(f):
    """
    Decorator reporting fixture load failures instead of a traceback.
    """
    @wraps(f)
    def wrapped(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except MalformedInputError as e:
            click.echo(f"Error: {str(e)}", err=True)
            return
    return wrapped
