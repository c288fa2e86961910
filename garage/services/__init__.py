"""Services for the Garage application."""
from garage.services.loader_service import LoaderService, MalformedInputError
from garage.services.people_service import PeopleService


__all__ = [
    'LoaderService',
    'MalformedInputError',
    'PeopleService',
]
