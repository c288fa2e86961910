"""Car commands for the Garage CLI."""

from datetime import date

import click
from tabulate import tabulate

from garage.services.loader_service import LoaderService
from garage.cli_module.utils import fixture_option, format_price, handle_load_errors


@click.group(name="cars")
def cars_group():
    """Query the cars catalogue."""
    pass


@cars_group.command(name="list")
@click.option("--electric", is_flag=True, help="Only show electric and hybrid cars")
@click.option("--as-of-year", type=int, default=None,
              help="Year to estimate values for (default: current year)")
@fixture_option("Cars fixture to read")
@handle_load_errors
def list_cars(electric, as_of_year, path):
    """List cars with their estimated value."""
    cars = LoaderService.load_cars(path)
    if as_of_year is None:
        as_of_year = date.today().year

    if electric:
        cars = [car for car in cars if car.is_electric]

    if not cars:
        click.echo("No cars found.")
        return

    table_data = [
        [
            f"{car.make} {car.model}",
            car.year,
            car.color,
            car.fuel_type.name,
            car.horse_power,
            format_price(car.price),
            format_price(car.estimated_value(as_of_year)),
        ]
        for car in cars
    ]

    click.echo(f"\n{len(cars)} car(s), values estimated for {as_of_year}:\n")
    click.echo(tabulate(
        table_data,
        headers=["Car", "Year", "Color", "Fuel", "HP", "Price", "Estimated Value"],
        tablefmt="grid"
    ))
