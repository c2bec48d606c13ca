"""Phone number display formatting. Stored phones stay as the raw ten digits."""

import phonenumbers


def format_phone(digits: str, region: str | None = "US") -> str:
    """Return the number in the region's national format, or digits unchanged.

    Only numbers that parse and are valid for the region are reformatted, so
    "2025551234" with region "US" becomes "(202) 555-1234" while "0000000000"
    is returned as-is.
    """
    if not digits or not region:
        return digits
    try:
        parsed = phonenumbers.parse(digits, region)
    except phonenumbers.NumberParseException:
        return digits
    if not phonenumbers.is_valid_number_for_region(parsed, region):
        return digits
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.NATIONAL)
