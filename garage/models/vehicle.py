"""Vehicle entity for the Garage application."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict
from uuid import UUID, uuid4

from garage.models.validation import (
    ValidationError,
    require_non_negative,
    require_text,
)

MIN_YEAR = 1900


class FuelType(Enum):
    """Fuel categories a vehicle can run on."""
    GASOLINE = auto()
    DIESEL = auto()
    ELECTRIC = auto()
    HYBRID = auto()
    HYDROGEN = auto()


# Yearly depreciation rate per fuel category
DEPRECIATION_RATES: Dict[FuelType, float] = {
    FuelType.ELECTRIC: 0.10,
    FuelType.HYBRID: 0.12,
    FuelType.GASOLINE: 0.15,
    FuelType.DIESEL: 0.13,
    FuelType.HYDROGEN: 0.08,
}


@dataclass(frozen=True)
class Vehicle:
    """
    Represents a vehicle owned by a person.

    Attributes:
        make: Vehicle manufacturer
        model: Vehicle model
        color: Vehicle color
        year: Year of manufacture, 1900 or later
        price: Purchase price, never negative
        vin: Unique identifying code of the vehicle
        fuel_type: Fuel category of the vehicle
        horse_power: Engine power, never negative
        id: Unique identifier for the vehicle
    """
    make: str
    model: str
    color: str
    year: int
    price: float
    vin: str
    fuel_type: FuelType
    horse_power: int
    id: UUID = None

    def __post_init__(self):
        """Validate fields and initialize default values."""
        if self.id is None:
            object.__setattr__(self, "id", uuid4())
        require_text(self.make, "Make")
        require_text(self.model, "Model")
        if self.year is None or self.year < MIN_YEAR:
            raise ValidationError(f"Year must be at least {MIN_YEAR}")
        require_non_negative(self.price, "Price")
        require_text(self.vin, "VIN")
        if not isinstance(self.fuel_type, FuelType):
            raise ValidationError("Fuel type cannot be null")
        require_non_negative(self.horse_power, "Horse power")

    @property
    def full_description(self) -> str:
        """Get a single-line, human readable description of the vehicle."""
        return (
            f"{self.make} {self.model} ({self.year}) - {self.color} - "
            f"{self.fuel_type.name} - {self.horse_power}HP - ${self.price:.2f}"
        )

    @property
    def is_electric(self) -> bool:
        """Check if the vehicle is electric or hybrid."""
        return self.fuel_type in (FuelType.ELECTRIC, FuelType.HYBRID)

    def estimated_value(self, current_year: int) -> float:
        """
        Estimate the value of the vehicle at a given year.

        The price is depreciated once per year of age using the rate of the
        vehicle's fuel category. A year before manufacture gives a negative
        age, which appreciates the value instead.

        Args:
            current_year: Year to estimate the value for

        Returns:
            float: Estimated value
        """
        age = current_year - self.year
        rate = DEPRECIATION_RATES[self.fuel_type]
        return self.price * (1 - rate) ** age
