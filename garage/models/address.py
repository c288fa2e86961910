"""Address value object for the Garage application."""

from dataclasses import dataclass

from garage.models.validation import require_text


@dataclass(frozen=True)
class Address:
    """
    Represents a postal address.

    Attributes:
        street: Street address
        city: City name
        state: State or region
        zip_code: Postal or zip code
        country: Country name
    """
    street: str
    city: str
    state: str
    zip_code: str
    country: str

    def __post_init__(self):
        require_text(self.street, "Street")
        require_text(self.city, "City")
        require_text(self.state, "State")
        require_text(self.zip_code, "Zip code")
        require_text(self.country, "Country")

    @property
    def formatted_address(self) -> str:
        """Get the full formatted address."""
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}, {self.country}"
