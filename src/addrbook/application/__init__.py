"""Application layer: use cases, retry policy, ports, and DTOs. Depends only on domain."""

from addrbook.application.contact_service import ContactService, EditSession
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
    MalformedRecord,
    NoChanges,
    Saved,
)
from addrbook.application.ports import ContactCodec, ContactStore
from addrbook.application.retry import (
    MAX_ATTEMPTS,
    RetryChoice,
    RetryController,
    RetryState,
    parse_retry_choice,
)

__all__ = [
    "MAX_ATTEMPTS",
    "ContactCodec",
    "ContactCreated",
    "ContactDeleted",
    "ContactNotFound",
    "ContactService",
    "ContactStore",
    "ContactSummary",
    "ContactUpdated",
    "EditSession",
    "FileUnavailable",
    "Invalid",
    "Loaded",
    "MalformedHeader",
    "MalformedRecord",
    "NoChanges",
    "RetryChoice",
    "RetryController",
    "RetryState",
    "Saved",
    "parse_retry_choice",
]
