"""Field validation for contacts. Pure functions; duplicate checks take the contacts to scan."""

from collections.abc import Iterable
from enum import Enum

from addrbook.domain.entities import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_LENGTH,
    Contact,
)


class ValidationStatus(Enum):
    VALID = "valid"
    EMPTY_INPUT = "empty_input"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_VALUE = "duplicate_value"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ValidationStatus.VALID: "Looks good.",
    ValidationStatus.EMPTY_INPUT: "A value is required.",
    ValidationStatus.INVALID_CHARACTERS: (
        "Only letters and spaces are allowed in names, and only digits in phone numbers."
    ),
    ValidationStatus.INVALID_LENGTH: (
        f"Phone numbers must be exactly {PHONE_LENGTH} digits; "
        f"names and emails at most {NAME_MAX_LENGTH} characters."
    ),
    ValidationStatus.INVALID_FORMAT: "That email doesn't look right. Try a format like name@example.com.",
    ValidationStatus.DUPLICATE_VALUE: "That value already belongs to another contact.",
}


def validate_name(name: str) -> ValidationStatus:
    """Names are non-empty and made of letters and whitespace only."""
    if len(name) == 0:
        return ValidationStatus.EMPTY_INPUT
    for ch in name:
        if not ch.isalpha() and not ch.isspace():
            return ValidationStatus.INVALID_CHARACTERS
    return ValidationStatus.VALID


def validate_phone(phone: str) -> ValidationStatus:
    """Phones are exactly ten ASCII digits. Length is checked before content."""
    if len(phone) == 0:
        return ValidationStatus.EMPTY_INPUT
    if len(phone) != PHONE_LENGTH:
        return ValidationStatus.INVALID_LENGTH
    for ch in phone:
        if ch not in "0123456789":
            return ValidationStatus.INVALID_CHARACTERS
    return ValidationStatus.VALID


def validate_email(email: str) -> ValidationStatus:
    """Structural check only: lowercase, an '@' followed somewhere by a '.',
    and an alphanumeric character right before the first '@' and the last '.'.
    The part after the last '.' is not checked.
    """
    if len(email) == 0:
        return ValidationStatus.EMPTY_INPUT
    if any(ch.isupper() for ch in email):
        return ValidationStatus.INVALID_FORMAT
    at = email.find("@")
    dot = email.rfind(".")
    if at == -1 or dot == -1 or dot < at:
        return ValidationStatus.INVALID_FORMAT
    if at == 0 or not email[at - 1].isalnum():
        return ValidationStatus.INVALID_FORMAT
    if dot == 0 or not email[dot - 1].isalnum():
        return ValidationStatus.INVALID_FORMAT
    return ValidationStatus.VALID


def is_duplicate_phone(candidate: str, contacts: Iterable[Contact]) -> bool:
    return any(c.phone == candidate for c in contacts)


def is_duplicate_email(candidate: str, contacts: Iterable[Contact]) -> bool:
    return any(c.email == candidate for c in contacts)


def check_name(name: str) -> ValidationStatus:
    status = validate_name(name)
    if status is ValidationStatus.VALID and len(name) > NAME_MAX_LENGTH:
        return ValidationStatus.INVALID_LENGTH
    return status


def check_phone(phone: str, contacts: Iterable[Contact]) -> ValidationStatus:
    status = validate_phone(phone)
    if status is ValidationStatus.VALID and is_duplicate_phone(phone, contacts):
        return ValidationStatus.DUPLICATE_VALUE
    return status


def check_email(email: str, contacts: Iterable[Contact]) -> ValidationStatus:
    status = validate_email(email)
    if status is not ValidationStatus.VALID:
        return status
    if len(email) > EMAIL_MAX_LENGTH:
        return ValidationStatus.INVALID_LENGTH
    if is_duplicate_email(email, contacts):
        return ValidationStatus.DUPLICATE_VALUE
    return status
