"""People commands for the Garage CLI."""

import click
from tabulate import tabulate

from garage.models.person_summary import PersonSummary
from garage.services.loader_service import LoaderService
from garage.services.people_service import PeopleService
from garage.cli_module.utils import fixture_option, format_price, handle_load_errors

# Name prefixes used when none are given
DEFAULT_PREFIXES = ("G", "E")


@click.group(name="people")
def people_group():
    """Query people and the cars they own."""
    pass


@people_group.command(name="list")
@fixture_option("People fixture to read")
@handle_load_errors
def list_people(path):
    """List all people with their car totals."""
    people = LoaderService.load_people(path)

    if not people:
        click.echo("No people found.")
        return

    table_data = [
        [
            person.full_name,
            person.age,
            person.email,
            len(person.cars),
            format_price(person.total_car_value()),
        ]
        for person in people
    ]

    click.echo(f"\n{len(people)} people loaded:\n")
    click.echo(tabulate(
        table_data,
        headers=["Name", "Age", "Email", "Cars", "Total Value"],
        tablefmt="grid"
    ))
    click.echo(f"\nFleet value: {format_price(PeopleService.total_fleet_value(people))}")


@people_group.command(name="names")
@click.option("--prefix", "-p", "prefixes", multiple=True,
              help="Name prefix to match (repeatable, default: G and E)")
@fixture_option("People fixture to read")
@handle_load_errors
def list_names(prefixes, path):
    """Show upper-cased first names starting with the given prefixes."""
    people = LoaderService.load_people(path)
    prefixes = prefixes or DEFAULT_PREFIXES

    names = PeopleService.names_starting_with(people, prefixes)

    click.echo(f"Total people loaded: {len(people)}")
    click.echo(f"First names: {', '.join(person.first_name for person in people[:5])}")
    if not names:
        click.echo(f"No names start with {', '.join(prefixes)}.")
        return
    click.echo(f"Matching names: {', '.join(names)}")


@people_group.command(name="show")
@click.argument("email", metavar="EMAIL")
@fixture_option("People fixture to read")
@handle_load_errors
def show_person(email, path):
    """
    Show the summary of a person.

    EMAIL: The email address of the person to show.
    """
    people = LoaderService.load_people(path)
    person = PeopleService.find_by_email(people, email)

    if person is None:
        click.echo(f"Error: No person found with email {email}", err=True)
        return

    summary = PersonSummary.from_person(person)

    click.echo(f"Name: {summary.full_name}")
    click.echo(f"Age: {summary.age}")
    click.echo(f"Birth Date: {summary.birth_date.isoformat()}")
    click.echo(f"Email: {summary.email}")
    click.echo(f"Phone: {summary.phone_number or 'N/A'}")
    click.echo(f"Gender: {summary.gender}")
    click.echo(f"Address: {summary.address}")

    if not summary.cars:
        click.echo("\nNo cars registered.")
        return

    click.echo(f"\nCars ({len(summary.cars)}):\n")
    click.echo(tabulate(
        [[car.make_and_model, car.year, car.color, format_price(car.price)] for car in summary.cars],
        headers=["Car", "Year", "Color", "Price"],
        tablefmt="grid"
    ))
    click.echo(f"\nTotal value: {format_price(summary.total_car_value())}")
