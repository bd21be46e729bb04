"""Address value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """
    Immutable postal address.

    Embedded by value in Member and Delivery (three columns on each table),
    so two entities never share an Address instance.
    """
    city: str
    street: str
    zipcode: str

    def __str__(self) -> str:
        return f"{self.city} {self.street} ({self.zipcode})"
