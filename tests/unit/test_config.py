"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.party_planner.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(database_url="sqlite+aiosqlite://", _env_file=None)

    assert settings.port == 8080
    assert settings.access_token_bytes == 128
    assert settings.min_password_length == 8


def test_wildcard_cors_rejected():
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite+aiosqlite://", cors_origins=["*"], _env_file=None)


def test_short_tokens_rejected():
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite+aiosqlite://", access_token_bytes=16, _env_file=None)
