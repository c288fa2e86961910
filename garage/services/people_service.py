"""People query service for Garage application."""

import logging
from operator import attrgetter
from typing import Iterable, List, Optional

from garage.models.person import Person
from garage.models.person_summary import PersonSummary
from garage.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


class PeopleService:
    """Service for querying collections of people and their cars."""

    @staticmethod
    def names_starting_with(people: List[Person], prefixes: Iterable[str]) -> List[str]:
        """
        Get the upper-cased first names starting with any of the prefixes.

        Args:
            people: People to search
            prefixes: Name prefixes to match, case sensitive

        Returns:
            List[str]: Matching names, upper-cased and sorted
        """
        prefixes = tuple(prefixes)
        return sorted(
            person.first_name.upper()
            for person in people
            if person.first_name.startswith(prefixes)
        )

    @staticmethod
    def summarize(people: List[Person]) -> List[PersonSummary]:
        """Project every person onto its summary, keeping the order."""
        return [PersonSummary.from_person(person) for person in people]

    @staticmethod
    def electric_car_owners(people: List[Person]) -> List[Person]:
        """Get the people owning at least one electric or hybrid car."""
        return [person for person in people if person.has_electric_car()]

    @staticmethod
    def total_fleet_value(people: List[Person]) -> float:
        """Get the summed value of every car owned by the given people."""
        return float(sum(person.total_car_value() for person in people))

    @staticmethod
    def most_expensive_car(people: List[Person]) -> Optional[Vehicle]:
        """
        Find the most expensive car across all people.

        Returns:
            Optional[Vehicle]: The first car with the highest price, or None
            when nobody owns a car
        """
        cars = [car for person in people for car in person.cars]
        return max(cars, key=attrgetter("price"), default=None)

    @staticmethod
    def find_by_email(people: List[Person], email: str) -> Optional[Person]:
        """Find the first person with the given email, ignoring case."""
        email = email.strip().lower()
        for person in people:
            if person.email.lower() == email:
                return person
        logger.debug(f"No person found with email {email}")
        return None
