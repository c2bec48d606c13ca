"""
Address book core: clean-architecture layout.

- domain: Contact entity and field validation. No outer dependencies.
- application: use cases (ContactService, EditSession), RetryController, ports, DTOs.
- infrastructure: adapters (InMemoryContactStore, FlatFileCodec, phone formatting).
"""

from addrbook.application import (
    ContactCreated,
    ContactDeleted,
    ContactNotFound,
    ContactService,
    ContactStore,
    ContactSummary,
    ContactUpdated,
    FileUnavailable,
    Invalid,
    Loaded,
    MalformedHeader,
    RetryController,
    Saved,
)
from addrbook.domain import Contact, SearchField, ValidationStatus
from addrbook.infrastructure import FlatFileCodec, InMemoryContactStore

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactDeleted",
    "ContactNotFound",
    "ContactService",
    "ContactStore",
    "ContactSummary",
    "ContactUpdated",
    "FileUnavailable",
    "FlatFileCodec",
    "InMemoryContactStore",
    "Invalid",
    "Loaded",
    "MalformedHeader",
    "RetryController",
    "Saved",
    "SearchField",
    "ValidationStatus",
]
