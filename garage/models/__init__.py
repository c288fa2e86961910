"""Entity models for the Garage application."""
from garage.models.validation import ValidationError
from garage.models.vehicle import Vehicle, FuelType, DEPRECIATION_RATES
from garage.models.address import Address
from garage.models.person import Person, Gender
from garage.models.person_summary import PersonSummary, CarSummary, NO_ADDRESS


__all__ = [
    'ValidationError',
    'Vehicle',
    'FuelType',
    'DEPRECIATION_RATES',
    'Address',
    'Person',
    'Gender',
    'PersonSummary',
    'CarSummary',
    'NO_ADDRESS',
]
