"""Security utilities - crypto and response headers."""

from src.party_planner.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    generate_access_token,
    hash_password,
    tokens_match,
    verify_password,
)
from src.party_planner.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "generate_access_token",
    "hash_password",
    "tokens_match",
    "verify_password",
    # Middleware
    "SecurityHeadersMiddleware",
]
