"""Settings tests."""

import pytest
from pydantic import ValidationError

from src.config import Settings


def make_settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


def test_show_db_errors_follows_environment():
    assert make_settings(environment="development").show_db_errors is True
    assert (
        make_settings(environment="staging", database_url="sqlite:///./x.db").show_db_errors
        is False
    )


def test_show_db_errors_override():
    assert make_settings(environment="development", expose_db_errors=False).show_db_errors is False


def test_production_requires_remote_database():
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        make_settings(
            environment="production",
            bcrypt_rounds=12,
            database_url="mysql+pymysql://root:@localhost:3306/ecommerce_db",
        )


def test_production_requires_bcrypt_work_factor():
    with pytest.raises(ValidationError, match="BCRYPT_ROUNDS"):
        make_settings(
            environment="production",
            bcrypt_rounds=4,
            database_url="mysql+pymysql://shop:pw@db.internal/ecommerce_db",
        )


def test_production_settings():
    settings = make_settings(
        environment="production",
        bcrypt_rounds=12,
        database_url="mysql+pymysql://shop:pw@db.internal/ecommerce_db",
    )
    assert settings.is_production
    assert settings.show_db_errors is False
