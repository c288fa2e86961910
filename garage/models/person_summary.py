"""Summary projections of the Garage entities."""

from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Callable, List, Optional, Tuple

from garage.models.person import Person
from garage.models.validation import require_present, require_text

NO_ADDRESS = "No address provided"


@dataclass(frozen=True)
class CarSummary:
    """Flattened view of a vehicle for display."""
    make_and_model: str
    year: int
    color: str
    price: float


@dataclass(frozen=True)
class PersonSummary:
    """
    Flattened, read-only snapshot of a person.

    Built with ``from_person``. The projection drops the ids, the make/model
    split, fuel types, horse power and VINs, so a person cannot be rebuilt
    from a summary.

    Attributes:
        full_name: First and last name joined by a space
        age: Age in years
        birth_date: Date of birth
        email: Email address
        phone_number: Phone number, if known
        gender: Gender as display text
        address: Formatted address or a placeholder
        cars: Summaries of the person's cars, in order
    """
    full_name: str
    age: int
    birth_date: date
    email: str
    phone_number: Optional[str]
    gender: str
    address: str
    cars: Tuple[CarSummary, ...] = ()

    def __post_init__(self):
        require_text(self.full_name, "Full name")
        require_present(self.email, "Email")
        object.__setattr__(self, "cars", tuple(self.cars or ()))

    @classmethod
    def from_person(cls, person: Person) -> "PersonSummary":
        """
        Project a person onto its summary.

        Args:
            person: Person to summarize

        Returns:
            PersonSummary: The flattened snapshot
        """
        car_summaries = [
            CarSummary(
                make_and_model=f"{car.make} {car.model}",
                year=car.year,
                color=car.color,
                price=car.price,
            )
            for car in person.cars
        ]
        address = person.address.formatted_address if person.address else NO_ADDRESS

        return cls(
            full_name=person.full_name,
            age=person.age,
            birth_date=person.birth_date,
            email=person.email,
            phone_number=person.phone_number,
            gender=person.gender.name,
            address=address,
            cars=car_summaries,
        )

    def filter_cars(self, predicate: Callable[[CarSummary], bool]) -> List[CarSummary]:
        """Get the car summaries matching a predicate, in order."""
        return [car for car in self.cars if predicate(car)]

    def total_car_value(self) -> float:
        """Get the summed price of all cars."""
        return float(sum(car.price for car in self.cars))

    def find_most_expensive_car(self) -> Optional[CarSummary]:
        """Find the first car summary with the highest price, if any."""
        return max(self.cars, key=attrgetter("price"), default=None)
