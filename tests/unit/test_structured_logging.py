"""Tests for structured logging context."""

import pytest
import structlog

from src.taskboard.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
    setup_logging,
)

pytestmark = pytest.mark.unit


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    assert "request_id" not in capturing_logger.calls[0].kwargs


def test_bind_user_context(capturing_logger):
    """Test binding the acting user id to logs."""
    bind_user_context(42)
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["user_id"] == 42


def test_clear_request_context(capturing_logger):
    """Test that clearing removes all bound context."""
    bind_request_context("req-1")
    bind_user_context(7)
    clear_request_context()
    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs


@pytest.fixture
def restore_structlog_config():
    """Restore the global structlog configuration after the test."""
    old_config = structlog.get_config()
    yield
    structlog.configure(**old_config)


@pytest.mark.parametrize(
    ("debug", "app_env", "renderer"),
    [
        (True, "development", structlog.dev.ConsoleRenderer),
        (False, "development", structlog.processors.JSONRenderer),
        (True, "production", structlog.processors.JSONRenderer),
    ],
)
def test_renderer_follows_debug_and_environment(
    restore_structlog_config, debug: bool, app_env: str, renderer: type
):
    """Production always renders JSON, even with debug enabled."""
    setup_logging(debug, app_env)

    assert isinstance(structlog.get_config()["processors"][-1], renderer)
