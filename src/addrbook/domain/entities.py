"""Domain entities: Contact, SearchField, and the field ceilings."""

from dataclasses import dataclass
from enum import Enum

# Longest accepted name and email (the persisted format reserves 50 bytes with terminator).
NAME_MAX_LENGTH = 49
EMAIL_MAX_LENGTH = 49
PHONE_LENGTH = 10


class SearchField(Enum):
    """Contact field used for exact-match search and edits."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"


@dataclass(frozen=True)
class Contact:
    """
    One named record with phone and email, uniquely identified by id.
    The id is assigned by the store and never changes.
    """

    id: int
    name: str
    phone: str
    email: str

    def __post_init__(self):
        if not isinstance(self.id, int) or self.id < 1:
            raise ValueError("Contact id must be a positive integer.")

    def field_value(self, field: SearchField) -> str:
        if field is SearchField.NAME:
            return self.name
        if field is SearchField.PHONE:
            return self.phone
        if field is SearchField.EMAIL:
            return self.email
        raise ValueError(f"Unknown search field: {field!r}")
