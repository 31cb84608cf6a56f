from typing import Mapping

from pydantic import BaseModel


class RegistrationForm(BaseModel):
    """Fields submitted by the registration form. Absent fields are empty."""

    username: str = ""
    name: str = ""
    gender: str = ""
    password: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping) -> "RegistrationForm":
        values = {}
        for field in cls.model_fields:
            value = data.get(field)
            if isinstance(value, str):
                values[field] = value
        return cls(**values)


class RegistrationResponse(BaseModel):
    success: bool
    message: str
    errors: list[str] | None = None
    user_id: int | None = None
