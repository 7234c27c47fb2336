"""Booking form validation rules, shared by the API and the admin tooling."""

import re
from typing import Any, Dict, Mapping, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NON_DIGITS = re.compile(r"\D")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PHONE_DIGITS = 10

BOOKING_FIELDS = ("name", "email", "phone", "date", "timeSlot")


def required(value: Optional[Any]) -> bool:
    """True when the value is present and not blank after trimming."""
    if value is None:
        return False
    return len(str(value).strip()) > 0


def email(value: Optional[str]) -> bool:
    """
    Lenient `local@domain.tld` check. Not an RFC validator: anything without
    whitespace, with one "@" and a "." somewhere after it, passes.
    """
    if value is None:
        return False
    return EMAIL_PATTERN.match(value.strip()) is not None


def phone(value: Optional[str]) -> bool:
    """True when exactly 10 digits remain after dropping every non-digit character."""
    if value is None:
        return False
    return len(NON_DIGITS.sub("", value)) == PHONE_DIGITS


def normalize_booking_fields(fields: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """Trims every booking field and lowercases the email. Missing fields become None."""
    normalized = {}
    for field in BOOKING_FIELDS:
        value = fields.get(field)
        normalized[field] = str(value).strip() if value is not None else None

    if normalized["email"]:
        normalized["email"] = normalized["email"].lower()
    return normalized


def validate_booking_form(fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Runs every rule against every field and returns {field: message} for the
    ones that failed. An empty dict means the booking can be stored.
    """
    errors = {}

    name = fields.get("name")
    if not required(name):
        errors["name"] = "Name is required"
    elif len(str(name).strip()) < NAME_MIN_LENGTH:
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters"
    elif len(str(name).strip()) > NAME_MAX_LENGTH:
        errors["name"] = f"Name cannot exceed {NAME_MAX_LENGTH} characters"

    if not required(fields.get("email")):
        errors["email"] = "Email is required"
    elif not email(str(fields["email"])):
        errors["email"] = "Please enter a valid email address"

    if not required(fields.get("phone")):
        errors["phone"] = "Phone number is required"
    elif not phone(str(fields["phone"])):
        errors["phone"] = f"Please enter exactly {PHONE_DIGITS} digits"

    if not required(fields.get("date")):
        errors["date"] = "Please select a date"

    if not required(fields.get("timeSlot")):
        errors["timeSlot"] = "Please select a time slot"

    return errors
