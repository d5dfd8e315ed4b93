"""Tests for settings and logging setup."""

import io
import json
import logging

import pytest

from dcp_model.config import get_settings
from dcp_model.config.settings import Settings
from dcp_model.utils import configure_logging, get_logger
from dcp_model.utils.logging import PACKAGE_LOGGER

pytestmark = pytest.mark.usefixtures("clear_settings_cache")


@pytest.fixture
def package_logger():
    """Remove handlers installed on the package logger and restore its level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestSettings:
    """Test configuration settings."""

    def test_default_settings(self):
        """Test default settings values."""
        settings = Settings()
        assert settings.api_group == "usvc-dev.developer.microsoft.com"
        assert settings.api_version == "v1"
        assert settings.container_kind == "Container"
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_group_version(self):
        """Test the combined apiVersion string."""
        settings = Settings(api_group="example.dev", api_version="v2")
        assert settings.group_version == "example.dev/v2"

    def test_environment_override(self, monkeypatch):
        """Test settings are read from DCP_ prefixed variables."""
        monkeypatch.setenv("DCP_CONTAINER_KIND", "ManagedContainer")
        monkeypatch.setenv("DCP_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.container_kind == "ManagedContainer"
        assert settings.log_level == "DEBUG"

    def test_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Test logging configuration."""

    def test_json_format(self, package_logger):
        """Test JSON logging emits structured records with extra fields."""
        stream = io.StringIO()
        configure_logging(Settings(log_level="INFO", log_format="json"), stream=stream)

        get_logger("dcp_model.test").info("status replaced", extra={"resource_name": "web"})

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "status replaced"
        assert record["level"] == "INFO"
        assert record["name"] == "dcp_model.test"
        assert record["resource_name"] == "web"
        assert "timestamp" in record

    def test_text_format(self, package_logger):
        """Test text logging uses the plain formatter and the configured level."""
        stream = io.StringIO()
        logger = configure_logging(
            Settings(log_level="warning", log_format="text"), stream=stream
        )

        get_logger("dcp_model.test").info("hidden")
        get_logger("dcp_model.test").warning("shown")

        out = stream.getvalue()
        assert "hidden" not in out
        assert "dcp_model.test - WARNING - shown" in out
        assert logger is package_logger
        assert logger.level == logging.WARNING

    def test_reads_cached_settings(self, package_logger, monkeypatch):
        """Test level and format default to the environment settings."""
        monkeypatch.setenv("DCP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DCP_LOG_FORMAT", "text")
        stream = io.StringIO()

        configure_logging(stream=stream)
        get_logger("dcp_model.models").debug("created")

        assert package_logger.level == logging.DEBUG
        assert "dcp_model.models - DEBUG - created" in stream.getvalue()

    def test_reconfigure_replaces_own_handler(self, package_logger):
        """Test repeated configuration keeps a single package handler."""
        host_handler = logging.NullHandler()
        package_logger.addHandler(host_handler)

        configure_logging(Settings(log_format="text"), stream=io.StringIO())
        second = io.StringIO()
        configure_logging(Settings(log_format="json"), stream=second)

        get_logger("dcp_model.test").warning("once")

        assert len(second.getvalue().strip().splitlines()) == 1
        assert host_handler in package_logger.handlers
        assert len(package_logger.handlers) == 2

    def test_root_logger_untouched(self, package_logger):
        """Test configuration does not install handlers on the root logger."""
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(Settings(), stream=io.StringIO())

        assert logging.getLogger().handlers == root_handlers
