"""Shared configuration for API-facing DTOs."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.domain.value_objects import Address


class ApiModel(BaseModel):
    """
    Base for every wire model.

    Fields are snake_case in Python and camelCase in JSON; both spellings
    are accepted on input. ``from_attributes`` lets entity views read ORM
    objects directly.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AddressDto(ApiModel):
    """DTO for an embedded address."""

    city: str
    street: str
    zipcode: str

    @classmethod
    def from_value(cls, address: Address) -> "AddressDto":
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)
