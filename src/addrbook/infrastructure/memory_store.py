"""In-memory implementation of ContactStore (the address book)."""

from collections.abc import Iterator
from dataclasses import replace

from addrbook.domain import Contact, SearchField


class InMemoryContactStore:
    """Stores contacts in a list. Order preserved by insertion; deletes splice.
    Ids come from a counter that only goes up, so a deleted id is never handed out again.
    """

    def __init__(self) -> None:
        self._contacts: list[Contact] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(self, name: str, phone: str, email: str) -> int:
        contact = Contact(id=self._next_id, name=name, phone=phone, email=email)
        self._contacts.append(contact)
        self._next_id += 1
        return contact.id

    def add_loaded(self, contact: Contact) -> None:
        self._contacts.append(contact)
        if contact.id >= self._next_id:
            self._next_id = contact.id + 1

    def get(self, contact_id: int) -> Contact | None:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def find_all(self, field: SearchField, query: str) -> list[Contact]:
        return [c for c in self._contacts if c.field_value(field) == query]

    def update(self, contact_id: int, name: str, phone: str, email: str) -> bool:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                self._contacts[i] = replace(contact, name=name, phone=phone, email=email)
                return True
        return False

    def delete(self, contact_id: int) -> bool:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                del self._contacts[i]
                return True
        return False

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def clear(self) -> None:
        """Drop every contact and restart ids at 1."""
        self._contacts.clear()
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))
