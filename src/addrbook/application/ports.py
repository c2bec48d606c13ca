"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Protocol

from addrbook.application.dto import FileUnavailable, Loaded, MalformedHeader, Saved
from addrbook.domain import Contact, SearchField


class ContactStore(Protocol):
    """Ordered contact collection that owns id generation."""

    def create(self, name: str, phone: str, email: str) -> int:
        """Append a new contact with the next id and return that id. Caller validates first."""
        ...

    def add_loaded(self, contact: Contact) -> None:
        """Append a contact that already has an id (from persistence)."""
        ...

    def get(self, contact_id: int) -> Contact | None:
        ...

    def find_all(self, field: SearchField, query: str) -> list[Contact]:
        """Return contacts whose field equals query exactly, in store order."""
        ...

    def update(self, contact_id: int, name: str, phone: str, email: str) -> bool:
        """Replace the mutable fields of a contact. Returns False if not found."""
        ...

    def delete(self, contact_id: int) -> bool:
        """Remove a contact. Returns True if one was removed."""
        ...

    def list_all(self) -> list[Contact]:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[Contact]:
        ...


class ContactCodec(Protocol):
    """Reads and writes the whole store to a file."""

    def save(self, contacts: Iterable[Contact], path: Path) -> Saved | FileUnavailable:
        ...

    def load(
        self, store: ContactStore, path: Path
    ) -> Loaded | FileUnavailable | MalformedHeader:
        ...
