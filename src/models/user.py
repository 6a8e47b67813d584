"""User model."""

from sqlalchemy import Column, DateTime, Integer, String

from src.database import Base


class User(Base):
    """A registered account; the ``password`` column holds a bcrypt hash only."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column("password", String(255), nullable=False)
    created_at = Column(DateTime, nullable=False)
