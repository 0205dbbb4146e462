"""Cryptographic utilities - password hashing and opaque access tokens."""

import secrets

import argon2

from src.party_planner.core.config import get_settings


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()

# Verified against when the email is unknown, so a failed sign-in costs the
# same whether or not the account exists.
DUMMY_PASSWORD_HASH = _password_hasher.hash("not-a-real-password")


def hash_password(password: str) -> str:
    """Hash password using Argon2id (random per-hash salt)."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def generate_access_token() -> str:
    """Generate an opaque, unguessable bearer token (hex encoded)."""
    settings = get_settings()
    return secrets.token_hex(settings.access_token_bytes)


def tokens_match(supplied: str, stored: str) -> bool:
    """Constant-time token comparison."""
    return secrets.compare_digest(supplied.encode(), stored.encode())
