"""Data access for the users table."""

import html
import logging
import re
from datetime import datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError, DatabaseConnectionError, PersistenceError
from src.models.user import User
from src.schemas.auth import UserResponse

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


def sanitize(value: str) -> str:
    """Strip HTML tags and surrounding whitespace, then entity-escape the rest."""
    return html.escape(_TAG_RE.sub("", value).strip())


def sanitize_email(email: str) -> str:
    return sanitize(email).lower()


class UserRepository:
    """All queries against ``users``.

    Every text value written or matched goes through ``sanitize`` first, so
    stored names and emails are HTML-escaped.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a user stamped with the current server time.

        Raises ConflictError when the email is already taken and
        PersistenceError for any other write failure.
        """
        user = User(
            name=sanitize(name),
            email=sanitize_email(email),
            password_hash=password_hash,
            created_at=datetime.now().replace(microsecond=0),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Insert rejected by unique email index")
            raise ConflictError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to insert user: {e}")
            raise PersistenceError() from e
        try:
            self.db.refresh(user)
        except SQLAlchemyError as e:
            logger.error(f"Failed to reload inserted user: {e}")
            raise PersistenceError() from e
        return user

    def find_by_email(self, email: str) -> User | None:
        """Get a user, including the password hash, by email."""
        try:
            return self.db.query(User).filter(User.email == sanitize_email(email)).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user by email: {e}")
            raise DatabaseConnectionError() from e

    def find_by_id(self, user_id: int) -> UserResponse | None:
        """Get a user by id without the password hash."""
        try:
            row = (
                self.db.query(User.id, User.name, User.email, User.created_at)
                .filter(User.id == user_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user {user_id}: {e}")
            raise DatabaseConnectionError() from e
        if row is None:
            return None
        return UserResponse.model_validate(row)

    def update_name(self, user_id: int, name: str) -> bool:
        """Overwrite a user's name.

        Returns True even when no row has ``user_id``.
        """
        try:
            self.db.query(User).filter(User.id == user_id).update(
                {User.name: sanitize(name)}, synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update user {user_id}: {e}")
            raise PersistenceError("Unable to update user") from e
        return True
