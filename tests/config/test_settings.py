import logging

import pytest
from pydantic import ValidationError

from plaid_client.auth.credentials import Environment
from plaid_client.config.logging import get_logger, mask_sensitive_data, setup_logging
from plaid_client.config.settings import LoggingSettings, Settings


@pytest.fixture
def plaid_env(monkeypatch):
    """Set the PLAID_* environment variables."""
    monkeypatch.setenv("PLAID_CLIENT_ID", "env_client_id")
    monkeypatch.setenv("PLAID_SECRET", "env_secret_value")
    monkeypatch.setenv("PLAID_ENV", "development")
    return monkeypatch


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the PLAID_* environment variables."""
    for name in ("PLAID_CLIENT_ID", "PLAID_SECRET", "PLAID_ENV", "PLAID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_logging():
    """Undo setup_logging changes to the package loggers."""
    saved = {}
    for name in ("plaid_client", "httpx", "httpcore", ""):
        logger = logging.getLogger(name)
        saved[name] = (logger.level, logger.propagate, list(logger.handlers))

    yield

    for name, (level, propagate, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers = handlers


class TestSettings:

    def test_from_environment(self, clean_env, plaid_env):
        """Test settings are read from PLAID_* variables."""
        settings = Settings()

        assert settings.client_id == "env_client_id"
        assert settings.secret.get_secret_value() == "env_secret_value"
        assert settings.env is Environment.DEVELOPMENT

    def test_env_defaults_to_sandbox(self, clean_env):
        """Test PLAID_ENV is optional."""
        clean_env.setenv("PLAID_CLIENT_ID", "env_client_id")
        clean_env.setenv("PLAID_SECRET", "env_secret_value")

        assert Settings().env is Environment.SANDBOX

    def test_missing_secret(self, clean_env):
        """Test a missing secret is a validation error."""
        clean_env.setenv("PLAID_CLIENT_ID", "env_client_id")

        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_environment(self, clean_env, plaid_env):
        """Test an unknown environment is rejected."""
        plaid_env.setenv("PLAID_ENV", "staging")

        with pytest.raises(ValidationError):
            Settings()

    def test_bad_log_level_does_not_block_credentials(self, clean_env, plaid_env):
        """Test credential settings ignore PLAID_LOG_LEVEL."""
        plaid_env.setenv("PLAID_LOG_LEVEL", "VERBOSE")

        assert Settings().client_id == "env_client_id"


class TestLoggingSettings:

    def test_default_log_level(self, clean_env):
        """Test the default level."""
        assert LoggingSettings().log_level == "INFO"

    def test_log_level_normalized(self, clean_env):
        """Test log level is upper-cased."""
        clean_env.setenv("PLAID_LOG_LEVEL", "debug")

        assert LoggingSettings().log_level == "DEBUG"

    def test_invalid_log_level(self, clean_env):
        """Test an unknown log level is rejected."""
        clean_env.setenv("PLAID_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            LoggingSettings()


class TestLogging:

    def test_get_logger_namespacing(self):
        """Test loggers live under the plaid_client namespace."""
        assert get_logger("plaid_client.client").name == "plaid_client.client"
        assert get_logger("webhooks").name == "plaid_client.webhooks"

    def test_setup_logging(self, restore_logging):
        """Test logging configuration of the package loggers."""
        setup_logging("DEBUG")

        logger = logging.getLogger("plaid_client")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_setup_logging_numeric_level(self, restore_logging):
        """Test numeric levels are accepted."""
        setup_logging(logging.WARNING)

        assert logging.getLogger("plaid_client").level == logging.WARNING

    def test_setup_logging_with_file(self, restore_logging, tmp_path):
        """Test the rotating file handler and its directory are created."""
        log_file = tmp_path / "logs" / "plaid.log"

        setup_logging("INFO", log_file=str(log_file))
        get_logger("test").info("written to file")

        assert log_file.parent.is_dir()
        assert "written to file" in log_file.read_text()

    def test_mask_sensitive_data(self):
        """Test partial masking keeps only the ends visible."""
        assert mask_sensitive_data("access-sandbox-12345678") == "acce***************5678"
        assert mask_sensitive_data("short") == "*****"
        assert mask_sensitive_data("") == ""
