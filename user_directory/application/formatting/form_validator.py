"""Field-level validation of the user form.

Every rule runs on every pass; the result maps a field name to its single
error message and is empty exactly when the form can be submitted.
"""

import re
from collections.abc import Callable

from user_directory.domain.entities import FormFields
from user_directory.domain.exceptions import FormatError
from user_directory.application.formatting.date_formatter import parse_display_date

ValidationErrorSet = dict[str, str]

_MOBILE_RE = re.compile(r"^[0-9]{10}\Z")
_PIN_CODE_RE = re.compile(r"^[0-9]{6}\Z")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z")
_DATE_RE = re.compile(r"^(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/\d{4}\Z")


def _check_full_name(value: str) -> str | None:
    if not value.strip():
        return "Full Name is required"
    if len(value.strip()) < 2:
        return "Full Name must be at least 2 characters long"
    return None


def _check_mobile_number(value: str) -> str | None:
    if not value:
        return "Mobile number is required"
    if not _MOBILE_RE.match(value):
        return "Mobile number must be 10 digits"
    return None


def _check_email_address(value: str) -> str | None:
    if not value:
        return "Email is required"
    if not _EMAIL_RE.match(value):
        return "Please enter a valid email address"
    return None


def _check_date_of_birth(value: str) -> str | None:
    if not value:
        return "Date of birth is required"
    if not _DATE_RE.match(value):
        return "Please enter date in DD/MM/YYYY format"
    try:
        parse_display_date(value)
    except FormatError:
        return "Please enter a valid date"
    return None


def _check_address_line1(value: str) -> str | None:
    if not value.strip():
        return "Address Line 1 is required"
    return None


def _check_city(value: str) -> str | None:
    if not value.strip():
        return "City is required"
    return None


def _check_pin_code(value: str) -> str | None:
    if not value:
        return "Pin code is required"
    if not _PIN_CODE_RE.match(value):
        return "Pin code must be 6 digits"
    return None


_RULES: dict[str, Callable[[str], str | None]] = {
    "full_name": _check_full_name,
    "mobile_number": _check_mobile_number,
    "email_address": _check_email_address,
    "date_of_birth": _check_date_of_birth,
    "address_line1": _check_address_line1,
    "city": _check_city,
    "pin_code": _check_pin_code,
}


def validate_field(name: str, fields: FormFields) -> str | None:
    """Return the error for one field, or None (fields without rules are always valid)."""
    rule = _RULES.get(name)
    if rule is None:
        return None
    return rule(getattr(fields, name) or "")


def validate(fields: FormFields) -> ValidationErrorSet:
    """Validate all fields of a form, without short-circuiting."""
    errors: ValidationErrorSet = {}
    for name in _RULES:
        message = validate_field(name, fields)
        if message is not None:
            errors[name] = message
    return errors
