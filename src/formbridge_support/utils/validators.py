"""
Field validators selected by field kind.

Each validator exposes ``validate`` and ``format`` so callers pick behaviour
from the field's declared kind instead of sniffing field ids.

The kind validators are exported for the form-filling front end, which checks
SIN, postal code, phone and email fields. The chat handlers only use
``ensure_present``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

ONTARIO_POSTAL_PREFIXES = ("K", "L", "M", "N", "P")

_POSTAL_RE = re.compile(r"^[A-Za-z]\d[A-Za-z][ -]?\d[A-Za-z]\d$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class FieldKind(str, Enum):
    """Kinds of form fields that carry format rules."""

    SIN = "sin"
    POSTAL_CODE = "postal_code"
    ONTARIO_POSTAL_CODE = "ontario_postal_code"
    PHONE = "phone"
    EMAIL = "email"


def ensure_present(value: Any, field: str) -> None:
    """Raise ValueError if value is falsy."""
    if value in (None, "", []):
        raise ValueError(f"{field} is required")


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def is_valid_sin(value: str) -> bool:
    """Check a Social Insurance Number with the Luhn checksum."""
    digits = _digits(value)
    if len(digits) != 9:
        return False

    total = 0
    for index, char in enumerate(digits):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_temporary_resident_sin(value: str) -> bool:
    """SINs starting with 9 are issued to temporary residents."""
    return _digits(value).startswith("9")


def format_sin(value: str) -> str:
    digits = _digits(value)
    if len(digits) != 9:
        return value
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def is_valid_postal_code(value: str) -> bool:
    return bool(_POSTAL_RE.match((value or "").strip()))


def is_ontario_postal_code(value: str) -> bool:
    if not is_valid_postal_code(value):
        return False
    return value.strip()[0].upper() in ONTARIO_POSTAL_PREFIXES


def format_postal_code(value: str) -> str:
    clean = re.sub(r"[\s-]", "", value or "").upper()
    if len(clean) != 6:
        return value
    return f"{clean[:3]} {clean[3:]}"


def is_valid_phone(value: str) -> bool:
    """10 digits, optionally preceded by the country code 1."""
    digits = _digits(value)
    return len(digits) == 10 or (len(digits) == 11 and digits.startswith("1"))


def format_phone(value: str) -> str:
    digits = _digits(value)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    if len(digits) != 10:
        return value
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match((value or "").strip()))


def format_email(value: str) -> str:
    return (value or "").strip().lower()


@dataclass(frozen=True)
class FieldValidator:
    """Validate/format pair for one field kind."""

    kind: FieldKind
    validate: Callable[[str], bool]
    format: Callable[[str], str]
    message: str


VALIDATORS: Dict[FieldKind, FieldValidator] = {
    FieldKind.SIN: FieldValidator(
        FieldKind.SIN,
        is_valid_sin,
        format_sin,
        "Must be a valid 9-digit Social Insurance Number",
    ),
    FieldKind.POSTAL_CODE: FieldValidator(
        FieldKind.POSTAL_CODE,
        is_valid_postal_code,
        format_postal_code,
        "Must be a valid Canadian postal code (e.g., M5V 1A1)",
    ),
    FieldKind.ONTARIO_POSTAL_CODE: FieldValidator(
        FieldKind.ONTARIO_POSTAL_CODE,
        is_ontario_postal_code,
        format_postal_code,
        "Must be an Ontario postal code (starts with K, L, M, N, or P)",
    ),
    FieldKind.PHONE: FieldValidator(
        FieldKind.PHONE,
        is_valid_phone,
        format_phone,
        "Must be a 10-digit Canadian phone number",
    ),
    FieldKind.EMAIL: FieldValidator(
        FieldKind.EMAIL,
        is_valid_email,
        format_email,
        "Must be a valid email address",
    ),
}


def get_validator(kind: FieldKind | str) -> FieldValidator:
    """Look up the validator for a field kind; raises KeyError for unknown kinds."""
    return VALIDATORS[FieldKind(kind)]
