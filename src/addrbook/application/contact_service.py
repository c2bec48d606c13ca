"""Contact creation, search, edit, delete, list, and persistence. One store per service instance."""

import logging
from dataclasses import replace
from pathlib import Path

from addrbook.application.dto import (
    ContactCreated,
    ContactDeleted,
    ContactNotFound,
    ContactSummary,
    ContactUpdated,
    FileUnavailable,
    Invalid,
    Loaded,
    MalformedHeader,
    NoChanges,
    Saved,
)
from addrbook.application.ports import ContactCodec, ContactStore
from addrbook.domain import (
    Contact,
    SearchField,
    ValidationStatus,
    check_email,
    check_name,
    check_phone,
)

logger = logging.getLogger(__name__)


class EditSession:
    """Scratch copy of one contact. Staged fields are written back only on save()."""

    def __init__(self, store: ContactStore, contact: Contact) -> None:
        self._store = store
        self._original = contact
        self._staged = contact
        self._closed = False
        self.has_changes = False

    @property
    def contact_id(self) -> int:
        return self._original.id

    @property
    def staged(self) -> ContactSummary:
        return ContactSummary.from_contact(self._staged)

    def set_name(self, value: str) -> ValidationStatus:
        status = check_name(value)
        if status is ValidationStatus.VALID:
            self._stage(name=value)
        return status

    def set_phone(self, value: str) -> ValidationStatus:
        # Scans the whole store, this contact included: re-entering the current phone is a duplicate.
        status = check_phone(value, self._store)
        if status is ValidationStatus.VALID:
            self._stage(phone=value)
        return status

    def set_email(self, value: str) -> ValidationStatus:
        status = check_email(value, self._store)
        if status is ValidationStatus.VALID:
            self._stage(email=value)
        return status

    def set_field(self, field: SearchField, value: str) -> ValidationStatus:
        if field is SearchField.NAME:
            return self.set_name(value)
        if field is SearchField.PHONE:
            return self.set_phone(value)
        if field is SearchField.EMAIL:
            return self.set_email(value)
        raise ValueError(f"Unknown field: {field!r}")

    def save(self) -> ContactUpdated | NoChanges | ContactNotFound:
        """Commit all staged fields at once."""
        self._ensure_open()
        self._closed = True
        if not self.has_changes:
            return NoChanges(contact_id=self.contact_id)
        staged = self._staged
        ok = self._store.update(staged.id, staged.name, staged.phone, staged.email)
        if not ok:
            return ContactNotFound(contact_id=staged.id)
        logger.info("Updated contact %d", staged.id)
        return ContactUpdated(contact_id=staged.id, name=staged.name)

    def cancel(self) -> None:
        self._closed = True
        self._staged = self._original
        self.has_changes = False

    def _stage(self, **changes: str) -> None:
        self._ensure_open()
        self._staged = replace(self._staged, **changes)
        self.has_changes = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Edit session is already closed.")


class ContactService:
    """Core flow over a contact store: validate -> create, search, edit, delete, list, save/load."""

    def __init__(
        self,
        store: ContactStore,
        *,
        codec: ContactCodec | None = None,
        data_file: Path | None = None,
    ) -> None:
        self._store = store
        self._codec = codec
        self._data_file = data_file

    @property
    def data_file(self) -> Path | None:
        return self._data_file

    def count(self) -> int:
        return len(self._store)

    def check_name(self, name: str) -> ValidationStatus:
        return check_name(name)

    def check_phone(self, phone: str) -> ValidationStatus:
        return check_phone(phone, self._store)

    def check_email(self, email: str) -> ValidationStatus:
        return check_email(email, self._store)

    def create_contact(
        self, name: str, phone: str, email: str
    ) -> ContactCreated | Invalid:
        """Validate all three fields and store the contact. First failing field wins."""
        for field, status in (
            (SearchField.NAME, self.check_name(name)),
            (SearchField.PHONE, self.check_phone(phone)),
            (SearchField.EMAIL, self.check_email(email)),
        ):
            if status is not ValidationStatus.VALID:
                return Invalid(field=field, status=status)
        contact_id = self._store.create(name, phone, email)
        logger.info("Created contact %d", contact_id)
        return ContactCreated(contact_id=contact_id, name=name)

    def search(self, field: SearchField, query: str) -> list[ContactSummary]:
        """Exact-match search on one field. Results are in store order."""
        return [
            ContactSummary.from_contact(c) for c in self._store.find_all(field, query)
        ]

    def get_contact(self, contact_id: int) -> ContactSummary | None:
        contact = self._store.get(contact_id)
        if contact is None:
            return None
        return ContactSummary.from_contact(contact)

    def begin_edit(self, contact_id: int) -> EditSession | ContactNotFound:
        contact = self._store.get(contact_id)
        if contact is None:
            return ContactNotFound(contact_id=contact_id)
        return EditSession(self._store, contact)

    def edit(
        self, contact_id: int, field: SearchField, value: str
    ) -> ContactUpdated | NoChanges | Invalid | ContactNotFound:
        """Change one field of a contact and commit it."""
        session = self.begin_edit(contact_id)
        if isinstance(session, ContactNotFound):
            return session
        status = session.set_field(field, value)
        if status is not ValidationStatus.VALID:
            session.cancel()
            return Invalid(field=field, status=status)
        return session.save()

    def delete(self, contact_id: int) -> ContactDeleted | ContactNotFound:
        contact = self._store.get(contact_id)
        if contact is None or not self._store.delete(contact_id):
            return ContactNotFound(contact_id=contact_id)
        logger.info("Deleted contact %d", contact_id)
        return ContactDeleted(contact_id=contact_id, name=contact.name)

    def list_contacts(self) -> list[ContactSummary]:
        """Return all contacts in store order."""
        return [ContactSummary.from_contact(c) for c in self._store.list_all()]

    def save(self) -> Saved | FileUnavailable:
        codec, path = self._persistence()
        return codec.save(self._store.list_all(), path)

    def load(self) -> Loaded | FileUnavailable | MalformedHeader:
        codec, path = self._persistence()
        return codec.load(self._store, path)

    def _persistence(self) -> tuple[ContactCodec, Path]:
        if self._codec is None or self._data_file is None:
            raise RuntimeError("ContactService was created without a codec and data file.")
        return self._codec, self._data_file
