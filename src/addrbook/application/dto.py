"""Result types returned by the application layer. Frozen dataclasses, never raised."""

from dataclasses import dataclass
from pathlib import Path

from addrbook.domain import Contact, SearchField, ValidationStatus


@dataclass(frozen=True)
class ContactSummary:
    contact_id: int
    name: str
    phone: str
    email: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactSummary":
        return cls(
            contact_id=contact.id,
            name=contact.name,
            phone=contact.phone,
            email=contact.email,
        )


@dataclass(frozen=True)
class ContactCreated:
    contact_id: int
    name: str


@dataclass(frozen=True)
class Invalid:
    """A field value was rejected. Recoverable: ask again or cancel."""

    field: SearchField
    status: ValidationStatus

    @property
    def reason(self) -> str:
        return self.status.message


@dataclass(frozen=True)
class ContactNotFound:
    contact_id: int


@dataclass(frozen=True)
class ContactUpdated:
    contact_id: int
    name: str


@dataclass(frozen=True)
class NoChanges:
    contact_id: int


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: int
    name: str


# --- Persistence results ---


@dataclass(frozen=True)
class MalformedRecord:
    """A record line that could not be parsed; skipped during load."""

    line_number: int
    text: str


@dataclass(frozen=True)
class Saved:
    path: Path
    count: int


@dataclass(frozen=True)
class Loaded:
    path: Path
    count: int
    skipped: tuple[MalformedRecord, ...] = ()


@dataclass(frozen=True)
class FileUnavailable:
    """The data file could not be opened. The store was not touched."""

    path: Path
    reason: str


@dataclass(frozen=True)
class MalformedHeader:
    """The leading record-count line is unreadable. Nothing was loaded."""

    path: Path
    line: str
