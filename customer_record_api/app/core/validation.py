"""
Field syntax checks for customer payloads.

The checks run in a fixed order and stop at the first failure, so a
payload with several bad fields always reports the same reason.  They
never touch storage.  ``address`` is free-form and is not checked.
"""

import re
from typing import Optional

from .errors import ValidationError

NAME_PATTERN = re.compile(r"[A-Za-z]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
LEADING_INTEGER_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")
INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

# SQLite stores integers as signed 64-bit values.
MIN_SQLITE_INTEGER = -(2 ** 63)
MAX_SQLITE_INTEGER = 2 ** 63 - 1

NAME_ERROR = "Names must contain only letters."
PHONE_ERROR = "Phone number must be 10 digits."
EMAIL_ERROR = "Invalid email format."


def _full_match(pattern: re.Pattern, value: Optional[str]) -> bool:
    return value is not None and pattern.fullmatch(value) is not None


def is_valid_name(value: Optional[str]) -> bool:
    return _full_match(NAME_PATTERN, value)


def is_valid_phone_number(value: Optional[str]) -> bool:
    return _full_match(PHONE_PATTERN, value)


def is_valid_email(value: Optional[str]) -> bool:
    # Substring match: surrounding text is tolerated.
    return value is not None and EMAIL_PATTERN.search(value) is not None


def check_customer_fields(
    first_name: Optional[str],
    last_name: Optional[str],
    phone_number: Optional[str],
    email: Optional[str],
) -> Optional[str]:
    """Return the first failure reason for the given fields, or ``None`` if valid."""
    if not (is_valid_name(first_name) and is_valid_name(last_name)):
        return NAME_ERROR
    if not is_valid_phone_number(phone_number):
        return PHONE_ERROR
    if not is_valid_email(email):
        return EMAIL_ERROR
    return None


def validate_customer(payload) -> None:
    """Raise ``ValidationError`` if ``payload`` breaks a field rule.

    ``payload`` is any object exposing the customer attributes, usually
    a ``CustomerCreate`` or ``CustomerUpdate`` instance.
    """
    reason = check_customer_fields(
        payload.first_name,
        payload.last_name,
        payload.phone_number,
        payload.email,
    )
    if reason is not None:
        raise ValidationError(reason)


def parse_page_number(raw: str) -> int:
    """Read a page number from a path segment.

    Leading digits are honoured (``"3abc"`` is page 3); anything
    unparseable, zero or negative becomes page 1.
    """
    match = LEADING_INTEGER_PATTERN.match(raw or "")
    if not match:
        return 1
    return max(int(match.group(1)), 1)


def parse_customer_id(raw: str) -> Optional[int]:
    """Read a customer id from a path segment.

    Returns ``None`` when the segment is not an integer or lies outside
    the range SQLite can store; such an id can never match a row.
    """
    if raw is None or INTEGER_PATTERN.fullmatch(raw) is None:
        return None
    value = int(raw)
    if not MIN_SQLITE_INTEGER <= value <= MAX_SQLITE_INTEGER:
        return None
    return value
