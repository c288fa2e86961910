"""Person entity for the Garage application."""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum, auto
from operator import attrgetter
from typing import Callable, List, Optional, Sequence, Tuple
from uuid import UUID, uuid4

from garage.models.address import Address
from garage.models.validation import (
    ValidationError,
    require_non_negative,
    require_present,
)
from garage.models.vehicle import Vehicle


class Gender(Enum):
    """Genders a person can be registered with."""
    MALE = auto()
    FEMALE = auto()
    OTHER = auto()


@dataclass(frozen=True, eq=False)
class Person:
    """
    Represents a person and the vehicles they own.

    A person is never modified in place: ``add_car``, ``with_cars`` and
    ``with_address`` return a new person carrying the same id. Two people are
    equal when their ids are equal, whatever their other attributes.

    Attributes:
        first_name: Person's first name
        last_name: Person's last name
        age: Age in years
        birth_date: Date of birth
        email: Email address
        phone_number: Phone number, if known
        gender: Person's gender
        address: Postal address, if known
        cars: Vehicles owned by the person, in order
        id: Unique identifier for the person
    """
    first_name: str
    last_name: str
    age: int
    birth_date: date
    email: str
    phone_number: Optional[str]
    gender: Gender
    address: Optional[Address] = None
    cars: Tuple[Vehicle, ...] = ()
    id: UUID = None

    def __post_init__(self):
        """Validate fields and take a private copy of the cars."""
        if self.id is None:
            object.__setattr__(self, "id", uuid4())
        require_present(self.first_name, "Name")
        require_present(self.last_name, "Last name")
        require_non_negative(self.age, "Age")
        require_present(self.birth_date, "Birth date")
        require_present(self.email, "Email")
        if not isinstance(self.gender, Gender):
            raise ValidationError("Gender cannot be null")
        object.__setattr__(self, "cars", tuple(self.cars or ()))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @property
    def full_name(self) -> str:
        """Get the person's full name."""
        return f"{self.first_name} {self.last_name}"

    def filter_cars(self, predicate: Callable[[Vehicle], bool]) -> List[Vehicle]:
        """Get the cars matching a predicate, in their original order."""
        return [car for car in self.cars if predicate(car)]

    def find_most_expensive_car(self) -> Optional[Vehicle]:
        """
        Find the most expensive car.

        Returns:
            Optional[Vehicle]: The first car with the highest price, or None
            if the person owns no cars
        """
        return max(self.cars, key=attrgetter("price"), default=None)

    def total_car_value(self) -> float:
        """Get the summed price of all cars."""
        return float(sum(car.price for car in self.cars))

    def has_electric_car(self) -> bool:
        """Check if the person owns an electric or hybrid car."""
        return any(car.is_electric for car in self.cars)

    def add_car(self, car: Vehicle) -> "Person":
        """
        Create a copy of this person with one more car.

        Args:
            car: Vehicle to append to the car collection

        Returns:
            Person: New person with the same id

        Raises:
            ValidationError: If no car is given
        """
        if car is None:
            raise ValidationError("Car cannot be null")
        return replace(self, cars=self.cars + (car,))

    def with_cars(self, cars: Sequence[Vehicle]) -> "Person":
        """Create a copy of this person owning the given cars."""
        return replace(self, cars=cars)

    def with_address(self, address: Optional[Address]) -> "Person":
        """Create a copy of this person living at the given address."""
        return replace(self, address=address)
