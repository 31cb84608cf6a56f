import enum
import logging
from dataclasses import dataclass, field

from passlib.hash import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from registration.config import get_settings
from registration.database import DuplicateUsernameError, StorageError, init_storage
from registration.models.user import User
from registration.schemas.registration import RegistrationForm, RegistrationResponse
from registration.services.sanitize import sanitize_form
from registration.services.validation import validate_form

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Username already exists. Please choose a different username."


class Outcome(str, enum.Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    DUPLICATE_USERNAME = "duplicate_username"
    STORAGE_ERROR = "storage_error"
    METHOD_NOT_ALLOWED = "method_not_allowed"


STATUS_CODES = {
    Outcome.SUCCESS: 200,
    Outcome.VALIDATION_ERROR: 422,
    Outcome.DUPLICATE_USERNAME: 409,
    Outcome.STORAGE_ERROR: 500,
    Outcome.METHOD_NOT_ALLOWED: 405,
}


@dataclass
class RegistrationResult:
    outcome: Outcome
    message: str
    errors: list[str] = field(default_factory=list)
    user_id: int | None = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.outcome]

    def to_payload(self) -> dict:
        return RegistrationResponse(
            success=self.success,
            message=self.message,
            errors=self.errors or None,
            user_id=self.user_id,
        ).model_dump(exclude_none=True)


def username_exists(db: Session, username: str) -> bool:
    return db.query(User).filter(User.username == username).count() > 0


def create_user(db: Session, form: RegistrationForm, rounds: int | None = None) -> int:
    """Hash the password, insert the user and return its id.

    Raises DuplicateUsernameError when the unique index rejects the row and
    StorageError for any other database failure.
    """
    rounds = rounds or get_settings().BCRYPT_ROUNDS
    user = User(
        username=form.username,
        name=form.name,
        gender=form.gender,
        password_hash=bcrypt.using(rounds=rounds).hash(form.password),
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateUsernameError(f"Username '{form.username}' is taken") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError(f"Registration failed: {e}") from e
    return user.id


def register_user(method: str, form: RegistrationForm, db: Session) -> RegistrationResult:
    """Run one registration attempt from method check to insert.

    Every path ends in a RegistrationResult; nothing is retried. The
    existence check only gives a friendly early answer: two concurrent
    requests can both pass it, and the unique index then rejects the
    second insert, which is reported as a duplicate too.
    """
    if method.upper() != "POST":
        logger.warning("Rejected %s registration request", method)
        return RegistrationResult(
            Outcome.METHOD_NOT_ALLOWED,
            "Invalid request method. Only POST is allowed.",
        )

    form = sanitize_form(form)
    errors = validate_form(form)
    if errors:
        return RegistrationResult(Outcome.VALIDATION_ERROR, "Validation failed", errors=errors)

    try:
        init_storage(db.get_bind())
        if username_exists(db, form.username):
            logger.info("Duplicate registration for username '%s'", form.username)
            return RegistrationResult(Outcome.DUPLICATE_USERNAME, DUPLICATE_MESSAGE)
        user_id = create_user(db, form)
    except DuplicateUsernameError:
        logger.info("Insert for '%s' lost the race on the unique index", form.username)
        return RegistrationResult(Outcome.DUPLICATE_USERNAME, DUPLICATE_MESSAGE)
    except (StorageError, SQLAlchemyError):
        logger.exception("Registration failed for username '%s'", form.username)
        return RegistrationResult(
            Outcome.STORAGE_ERROR,
            "An error occurred while saving your registration. Please try again later.",
        )

    logger.info("Registered user %d: %s", user_id, form.username)
    return RegistrationResult(Outcome.SUCCESS, "Registration successful!", user_id=user_id)
