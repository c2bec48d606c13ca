"""Domain layer: the Contact entity and field validation. No dependencies on outer layers."""

from addrbook.domain.entities import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_LENGTH,
    Contact,
    SearchField,
)
from addrbook.domain.validation import (
    ValidationStatus,
    check_email,
    check_name,
    check_phone,
    is_duplicate_email,
    is_duplicate_phone,
    validate_email,
    validate_name,
    validate_phone,
)

__all__ = [
    "EMAIL_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "PHONE_LENGTH",
    "Contact",
    "SearchField",
    "ValidationStatus",
    "check_email",
    "check_name",
    "check_phone",
    "is_duplicate_email",
    "is_duplicate_phone",
    "validate_email",
    "validate_name",
    "validate_phone",
]
