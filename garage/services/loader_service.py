"""Fixture loading service for Garage application."""

import os
import re
import json
import logging
from datetime import date
from typing import Dict, Any, Optional, List
from uuid import UUID

from dotenv import load_dotenv

from garage.models.address import Address
from garage.models.person import Person, Gender
from garage.models.validation import ValidationError
from garage.models.vehicle import Vehicle, FuelType

load_dotenv()

logger = logging.getLogger(__name__)

# Fixture location, overridable through the environment
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")
DATA_DIR = os.getenv("GARAGE_DATA_DIR", DEFAULT_DATA_DIR)
PEOPLE_FILE = os.getenv("GARAGE_PEOPLE_FILE", "people.json")
CARS_FILE = os.getenv("GARAGE_CARS_FILE", "cars.json")

# Values for the vehicle fields the people fixture does not carry
PLACEHOLDER = "Unknown"
DEFAULT_PRICE = 0.0
DEFAULT_FUEL_TYPE = FuelType.GASOLINE
DEFAULT_HORSE_POWER = 0

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class MalformedInputError(Exception):
    """Custom exception for fixtures that cannot be loaded."""
    pass


class LoaderService:
    """Service for reading people and cars from JSON fixtures."""

    @staticmethod
    def _read_json(path: str) -> Any:
        """
        Read and decode a JSON file.

        Args:
            path: Path of the file to read

        Returns:
            Any: Decoded JSON document

        Raises:
            MalformedInputError: If the file is unreadable or not valid JSON
        """
        logger.info(f"Loading fixture from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise MalformedInputError(f"Could not read {path}: {str(e)}") from e
        except UnicodeDecodeError as e:
            logger.error(f"{path} is not valid UTF-8: {e}")
            raise MalformedInputError(f"{path} is not valid UTF-8: {str(e)}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            raise MalformedInputError(f"Invalid JSON in {path}: {str(e)}") from e

    @staticmethod
    def parse_date(value: Any) -> date:
        """
        Parse an ISO ``YYYY-MM-DD`` calendar date.

        Raises:
            MalformedInputError: If the value is not a valid ISO date
        """
        if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
            raise MalformedInputError(f"Invalid date '{value}', expected YYYY-MM-DD")
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise MalformedInputError(f"Invalid date '{value}': {str(e)}") from e

    @staticmethod
    def _parse_enum(enum_cls, value: Any, label: str):
        try:
            return enum_cls[str(value).upper()]
        except KeyError:
            valid = ", ".join([member.name for member in enum_cls])
            raise MalformedInputError(f"Invalid {label} '{value}'. Choose from: {valid}")

    @staticmethod
    def _text(data: Dict[str, Any], key: str, required: bool = False) -> Optional[str]:
        """
        Get a string field from a fixture entry.

        Raises:
            KeyError: If a required key is missing
            MalformedInputError: If the value is neither a string nor null
        """
        if required and key not in data:
            raise KeyError(key)
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise MalformedInputError(
                f"Field '{key}' must be a string, got {type(value).__name__}"
            )
        return value

    @staticmethod
    def _fixture_car(data: Dict[str, Any]) -> Vehicle:
        """Build a vehicle from the reduced schema of the people fixture."""
        if not isinstance(data, dict):
            raise MalformedInputError("Car entries must be JSON objects")
        license_plate = LoaderService._text(data, "licensePlate")
        return Vehicle(
            make=LoaderService._text(data, "brand"),
            model=LoaderService._text(data, "model"),
            color=PLACEHOLDER,
            year=data.get("year", 0),
            price=DEFAULT_PRICE,
            vin=license_plate if license_plate else PLACEHOLDER,
            fuel_type=DEFAULT_FUEL_TYPE,
            horse_power=DEFAULT_HORSE_POWER,
        )

    @staticmethod
    def _address(data: Optional[Dict[str, Any]]) -> Optional[Address]:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise MalformedInputError("Address must be a JSON object")
        return Address(
            street=LoaderService._text(data, "street"),
            city=LoaderService._text(data, "city"),
            state=LoaderService._text(data, "state"),
            zip_code=LoaderService._text(data, "zipCode"),
            country=LoaderService._text(data, "country"),
        )

    @staticmethod
    def _person(data: Dict[str, Any]) -> Person:
        """Build a person, with its address and cars, from a fixture entry."""
        if not isinstance(data, dict):
            raise MalformedInputError("Person entries must be JSON objects")

        cars = data.get("cars") or []
        if not isinstance(cars, list):
            raise MalformedInputError("Person 'cars' must be a JSON array")

        return Person(
            first_name=LoaderService._text(data, "name"),
            last_name=LoaderService._text(data, "lastName"),
            age=data.get("age"),
            birth_date=LoaderService.parse_date(data.get("birthDate")),
            email=LoaderService._text(data, "email"),
            phone_number=LoaderService._text(data, "phoneNumber"),
            gender=LoaderService._parse_enum(Gender, data.get("gender"), "gender"),
            address=LoaderService._address(data.get("address")),
            cars=[LoaderService._fixture_car(car) for car in cars],
        )

    @staticmethod
    def _vehicle(data: Dict[str, Any]) -> Vehicle:
        """Build a vehicle from a full cars fixture entry."""
        if not isinstance(data, dict):
            raise MalformedInputError("Car entries must be JSON objects")

        raw_id = data.get("id")
        try:
            vehicle_id = UUID(str(raw_id)) if raw_id is not None else None
        except ValueError as e:
            raise MalformedInputError(f"Invalid car id '{raw_id}'") from e

        try:
            return Vehicle(
                id=vehicle_id,
                make=LoaderService._text(data, "make", required=True),
                model=LoaderService._text(data, "model", required=True),
                color=LoaderService._text(data, "color", required=True),
                year=data["year"],
                price=data["price"],
                vin=LoaderService._text(data, "vin", required=True),
                fuel_type=LoaderService._parse_enum(FuelType, data["fuelType"], "fuel type"),
                horse_power=data["horsePower"],
            )
        except KeyError as e:
            raise MalformedInputError(f"Car entry is missing field {e}") from e

    @staticmethod
    def load_people(path: Optional[str] = None) -> List[Person]:
        """
        Load people and their cars from a people fixture.

        Args:
            path: Fixture path; defaults to PEOPLE_FILE inside DATA_DIR

        Returns:
            List[Person]: People in fixture order

        Raises:
            MalformedInputError: If any part of the fixture cannot be loaded
        """
        path = path or os.path.join(DATA_DIR, PEOPLE_FILE)
        document = LoaderService._read_json(path)

        if not isinstance(document, dict) or not isinstance(document.get("people"), list):
            raise MalformedInputError(f"{path} must contain an object with a 'people' array")

        people = []
        for index, entry in enumerate(document["people"]):
            try:
                people.append(LoaderService._person(entry))
            except (MalformedInputError, ValidationError, TypeError) as e:
                logger.error(f"Invalid person at index {index} in {path}: {e}")
                raise MalformedInputError(f"Invalid person at index {index}: {str(e)}") from e

        logger.info(f"Loaded {len(people)} people from {path}")
        return people

    @staticmethod
    def load_cars(path: Optional[str] = None) -> List[Vehicle]:
        """
        Load vehicles from a cars fixture.

        Args:
            path: Fixture path; defaults to CARS_FILE inside DATA_DIR

        Returns:
            List[Vehicle]: Vehicles in fixture order

        Raises:
            MalformedInputError: If any part of the fixture cannot be loaded
        """
        path = path or os.path.join(DATA_DIR, CARS_FILE)
        document = LoaderService._read_json(path)

        if not isinstance(document, list):
            raise MalformedInputError(f"{path} must contain a JSON array of cars")

        cars = []
        for index, entry in enumerate(document):
            try:
                cars.append(LoaderService._vehicle(entry))
            except (MalformedInputError, ValidationError, TypeError) as e:
                logger.error(f"Invalid car at index {index} in {path}: {e}")
                raise MalformedInputError(f"Invalid car at index {index}: {str(e)}") from e

        logger.info(f"Loaded {len(cars)} cars from {path}")
        return cars
