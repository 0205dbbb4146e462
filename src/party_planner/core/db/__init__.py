"""Database utilities - handle, engine and migrations."""

from src.party_planner.core.db.engine import Database, create_engine_from_settings
from src.party_planner.core.db.migrations import run_migrations_async, run_migrations_sync

__all__ = [
    "Database",
    "create_engine_from_settings",
    "run_migrations_async",
    "run_migrations_sync",
]
