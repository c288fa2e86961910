"""Main CLI entry point for Garage application."""

import logging

import click

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

from garage.cli_module.commands.people_commands import people_group
from garage.cli_module.commands.cars_commands import cars_group


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Garage CLI for querying people and the cars they own."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


cli.add_command(people_group)
cli.add_command(cars_group)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
