"""Pure formatting and validation helpers for the user form and list."""

from .date_formatter import (
    DISPLAY_FORMAT,
    WIRE_FORMAT_ISO,
    WIRE_FORMAT_MDY,
    DateFormatter,
    format_date_label,
    is_ambiguous,
    mask_date_input,
    parse_display_date,
)
from .form_validator import ValidationErrorSet, validate, validate_field

__all__ = [
    "DISPLAY_FORMAT",
    "WIRE_FORMAT_ISO",
    "WIRE_FORMAT_MDY",
    "DateFormatter",
    "format_date_label",
    "is_ambiguous",
    "mask_date_input",
    "parse_display_date",
    "ValidationErrorSet",
    "validate",
    "validate_field",
]
