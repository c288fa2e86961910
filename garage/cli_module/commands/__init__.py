"""Command modules for the Garage CLI."""

from garage.cli_module.commands.people_commands import people_group
from garage.cli_module.commands.cars_commands import cars_group

__all__ = [
    'people_group',
    'cars_group',
]
