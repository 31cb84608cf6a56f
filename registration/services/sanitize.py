import re

from registration.schemas.registration import RegistrationForm

# A "<" not followed by whitespace opens a tag; an unclosed one runs to the end.
TAG_RE = re.compile(r"<(?!\s)[^>]*(?:>|$)")


def strip_tags(value: str) -> str:
    return TAG_RE.sub("", value)


def sanitize_form(form: RegistrationForm) -> RegistrationForm:
    # The password is hashed, never rendered, so it is kept byte for byte.
    return RegistrationForm(
        username=strip_tags(form.username).strip(),
        name=strip_tags(form.name).strip(),
        gender=form.gender.strip(),
        password=form.password,
    )
