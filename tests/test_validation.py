import pytest

from registration.schemas.registration import RegistrationForm
from registration.services.validation import validate_form


def _form(**overrides):
    data = {
        "username": "jane_doe",
        "name": "Jane Doe",
        "gender": "female",
        "password": "secret123",
    }
    data.update(overrides)
    return RegistrationForm(**data)


def test_valid_form():
    assert validate_form(_form()) == []


@pytest.mark.parametrize(
    "username, message",
    [
        ("", "Username is required"),
        ("ab", "Username must be at least 3 characters long"),
        ("a" * 51, "Username must not exceed 50 characters"),
        ("jane doe", "Username can only contain letters, numbers, and underscores"),
        ("jane-doe", "Username can only contain letters, numbers, and underscores"),
        ("jané", "Username can only contain letters, numbers, and underscores"),
    ],
)
def test_invalid_username(username, message):
    assert validate_form(_form(username=username)) == [message]


def test_username_bounds_accepted():
    assert validate_form(_form(username="abc")) == []
    assert validate_form(_form(username="A_1" * 16 + "xy")) == []


@pytest.mark.parametrize(
    "name, message",
    [
        ("", "Full name is required"),
        ("J", "Full name must be at least 2 characters long"),
        ("J" * 101, "Full name must not exceed 100 characters"),
    ],
)
def test_invalid_name(name, message):
    assert validate_form(_form(name=name)) == [message]


def test_gender_required():
    assert validate_form(_form(gender="")) == ["Gender is required"]


def test_gender_must_be_known():
    assert validate_form(_form(gender="robot")) == ["Invalid gender value"]


@pytest.mark.parametrize(
    "password, message",
    [
        ("", "Password is required"),
        ("12345", "Password must be at least 6 characters long"),
        ("x" * 256, "Password must not exceed 255 characters"),
    ],
)
def test_invalid_password(password, message):
    assert validate_form(_form(password=password)) == [message]


def test_all_violations_collected_in_order():
    errors = validate_form(RegistrationForm())
    assert errors == [
        "Username is required",
        "Full name is required",
        "Gender is required",
        "Password is required",
    ]


def test_password_with_nul_byte_rejected():
    assert validate_form(_form(password="secret\x00123")) == [
        "Password contains invalid characters"
    ]


def test_zero_username_is_checked_for_length():
    # "0" is a present value, not a missing one
    assert validate_form(_form(username="0")) == [
        "Username must be at least 3 characters long"
    ]
