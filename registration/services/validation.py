import re

from registration.models.user import GENDERS
from registration.schemas.registration import RegistrationForm

USERNAME_RE = re.compile(r"[A-Za-z0-9_]+")

USERNAME_MIN, USERNAME_MAX = 3, 50
NAME_MIN, NAME_MAX = 2, 100
PASSWORD_MIN, PASSWORD_MAX = 6, 255


def _check_username(username: str) -> str | None:
    if not username:
        return "Username is required"
    if len(username) < USERNAME_MIN:
        return f"Username must be at least {USERNAME_MIN} characters long"
    if len(username) > USERNAME_MAX:
        return f"Username must not exceed {USERNAME_MAX} characters"
    if not USERNAME_RE.fullmatch(username):
        return "Username can only contain letters, numbers, and underscores"
    return None


def _check_name(name: str) -> str | None:
    if not name:
        return "Full name is required"
    if len(name) < NAME_MIN:
        return f"Full name must be at least {NAME_MIN} characters long"
    if len(name) > NAME_MAX:
        return f"Full name must not exceed {NAME_MAX} characters"
    return None


def _check_gender(gender: str) -> str | None:
    if not gender:
        return "Gender is required"
    if gender not in GENDERS:
        return "Invalid gender value"
    return None


def _check_password(password: str) -> str | None:
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN:
        return f"Password must be at least {PASSWORD_MIN} characters long"
    if len(password) > PASSWORD_MAX:
        return f"Password must not exceed {PASSWORD_MAX} characters"
    if "\x00" in password:
        return "Password contains invalid characters"
    return None


def validate_form(form: RegistrationForm) -> list[str]:
    """Check every field and return one message per invalid field, in form order."""
    checks = [
        _check_username(form.username),
        _check_name(form.name),
        _check_gender(form.gender),
        _check_password(form.password),
    ]
    return [error for error in checks if error]
