from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Party Planner API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_user_emails: bool = False  # Keep False in production for GDPR compliance

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full
    migrate_on_startup: bool = True

    # Wipe and reload the catalog collections from bundled seed data on startup
    reset_db: bool = False

    # Auth
    access_token_bytes: int = 128
    min_password_length: int = 8
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1
    auth_rate_limit: str = "10/minute"

    # CORS
    cors_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcard origins since credentials are allowed."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("access_token_bytes")
    @classmethod
    def validate_token_bytes(cls, v: int) -> int:
        if v < 32:
            raise ValueError("ACCESS_TOKEN_BYTES must be at least 32")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
