"""Tests for structured logging context."""

from unittest.mock import MagicMock
from uuid import uuid7

import pytest
import structlog

from src.party_planner.core import config
from src.party_planner.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    request_id = "test-request-123"

    bind_request_context(request_id)
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == request_id


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_user_context_omits_email_by_default(capturing_logger):
    user_id = uuid7()

    bind_user_context(user_id, "test@example.com")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["user_id"] == str(user_id)
    assert "user_email" not in kwargs


def test_bind_user_context_with_email_logging_enabled(capturing_logger, monkeypatch):
    user_id = uuid7()
    mock_settings = MagicMock()
    mock_settings.log_user_emails = True
    monkeypatch.setattr(config, "get_settings", lambda: mock_settings)

    bind_user_context(user_id, "test@example.com")
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["user_email"] == "test@example.com"


def test_clear_request_context(capturing_logger):
    bind_request_context("test-request-123")
    bind_user_context(uuid7())

    clear_request_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


def test_service_log_carries_bound_context(capturing_logger):
    """Service loggers pick up the request context bound by the middleware."""
    from src.party_planner.core.logging import get_logger

    bind_request_context("abc123")
    get_logger("src.party_planner.services.project_service").info(
        "Project created", project_id="p1"
    )

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["event"] == "Project created"
    assert kwargs["request_id"] == "abc123"
    assert kwargs["project_id"] == "p1"


def test_bind_request_context_with_route(capturing_logger):
    bind_request_context("req-1", "GET", "/themes")
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["path"] == "/themes"
