"""Authentication service for registration, login and password handling."""

import logging

from email_validator import EmailNotValidError, validate_email
from passlib.context import CryptContext

from src.config import get_settings
from src.exceptions import (
    AccountNotFoundError,
    ConflictError,
    IncorrectPasswordError,
    PersistenceError,
    ValidationError,
)
from src.schemas.auth import LoginRequest, SignupRequest, UserResponse
from src.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

settings = get_settings()

MIN_PASSWORD_LENGTH = 6

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash; an unrecognised hash never matches."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Accept a bare address only; display-name and quoted forms are rejected."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def register_user(repo: UserRepository, data: SignupRequest) -> UserResponse:
    """Validate a signup request and create the user.

    Checks run in order and the first failure is raised: required fields,
    email format, password length, existing account.
    """
    if _is_blank(data.name) or _is_blank(data.email) or not data.password:
        raise ValidationError("All fields are required: name, email, password")

    email = normalize_email(data.email)
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")

    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if repo.find_by_email(email) is not None:
        logger.info("Signup rejected: email already registered")
        raise ConflictError()

    try:
        user = repo.create(data.name.strip(), email, get_password_hash(data.password))
    except PersistenceError as e:
        raise PersistenceError("Unable to register user. Please try again.") from e

    logger.info(f"Registered user {user.id}")
    return UserResponse.model_validate(user)


def authenticate_user(repo: UserRepository, data: LoginRequest) -> UserResponse:
    """Authenticate a user by email and password."""
    if _is_blank(data.email) or not data.password:
        raise ValidationError("Email and password are required")

    user = repo.find_by_email(normalize_email(data.email))
    if user is None:
        logger.info("Login rejected: unknown email")
        raise AccountNotFoundError()

    if not verify_password(data.password, user.password_hash):
        logger.info(f"Login rejected: incorrect password for user {user.id}")
        raise IncorrectPasswordError()

    return UserResponse.model_validate(user)
