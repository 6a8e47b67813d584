"""FastAPI dependencies for the database and repositories."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.user_repository import UserRepository


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
) -> UserRepository:
    """Get a user repository bound to the request's session."""
    return UserRepository(db)
