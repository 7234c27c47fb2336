import pytest

from app.core import validators
from app.core.validators import normalize_booking_fields, validate_booking_form


@pytest.mark.parametrize("value", ["9876543210", "987-654-3210", "(987) 654 3210", "+ 98765 43210"])
def test_phone_accepts_ten_digits_in_any_format(value):
    assert validators.phone(value) is True


@pytest.mark.parametrize("value", ["98765432", "987654321012", "", "phone", "+91 98765 43210"])
def test_phone_rejects_other_digit_counts(value):
    assert validators.phone(value) is False


@pytest.mark.parametrize("value", ["john@example.com", "  a@b.co  ", "first.last@sub.domain.org"])
def test_email_accepts_simple_addresses(value):
    assert validators.email(value) is True


@pytest.mark.parametrize("value", ["johnexample.com", "john@example", "john@@example.com", "jo hn@example.com", "@example.com", ""])
def test_email_rejects_missing_at_or_dot(value):
    assert validators.email(value) is False


def test_required():
    assert validators.required("x") is True
    assert validators.required("   ") is False
    assert validators.required(None) is False


def test_valid_form_has_no_errors(valid_form):
    assert validate_booking_form(valid_form) == {}


def test_missing_email_reports_only_email(valid_form):
    del valid_form["email"]
    assert validate_booking_form(valid_form) == {"email": "Email is required"}


def test_all_fields_reported_at_once():
    errors = validate_booking_form({"name": "J", "email": "nope", "phone": "123", "date": " ", "timeSlot": ""})

    assert errors == {
        "name": "Name must be at least 2 characters",
        "email": "Please enter a valid email address",
        "phone": "Please enter exactly 10 digits",
        "date": "Please select a date",
        "timeSlot": "Please select a time slot",
    }


def test_name_length_bounds(valid_form):
    valid_form["name"] = "x" * 101
    assert validate_booking_form(valid_form) == {"name": "Name cannot exceed 100 characters"}

    valid_form["name"] = "  " + "x" * 100 + "  "
    assert validate_booking_form(valid_form) == {}


def test_normalize_trims_and_lowercases_email(valid_form):
    valid_form["email"] = "  John@Example.COM "
    valid_form["name"] = " John Doe "
    del valid_form["date"]

    normalized = normalize_booking_fields(valid_form)

    assert normalized["email"] == "john@example.com"
    assert normalized["name"] == "John Doe"
    assert normalized["date"] is None
