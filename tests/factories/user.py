"""User factory for test data generation."""

from polyfactory import Use

from src.party_planner.core.security import generate_access_token, hash_password
from src.party_planner.models import User
from tests.factories.base import BaseFactory, generate_uuid7, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid7)
    email = Use(lambda: f"user_{generate_uuid7().hex[-8:]}@example.com")
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    access_token = Use(generate_access_token)
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
