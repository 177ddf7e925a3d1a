"""Tests for service configuration and logging setup."""

import io
import logging

import pytest

from cronspeak.config import DEFAULT_BANNER, ServiceConfig, configure_logging


class TestServiceConfig:
    """Tests for ServiceConfig."""

    def test_defaults(self):
        """Test the default listener settings."""
        config = ServiceConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 6000
        assert config.read_timeout == 30.0
        assert config.buffer_size == 64
        assert config.banner == DEFAULT_BANNER

    def test_from_env(self):
        """Test reading settings from environment variables."""
        config = ServiceConfig.from_env({
            "CRONSPEAK_HOST": "127.0.0.1",
            "CRONSPEAK_PORT": "7000",
            "CRONSPEAK_READ_TIMEOUT": "2.5",
            "CRONSPEAK_BUFFER_SIZE": "128",
            "CRONSPEAK_BANNER": "bye",
            "CRONSPEAK_LOG_LEVEL": "debug",
        })
        assert config == ServiceConfig(
            host="127.0.0.1",
            port=7000,
            read_timeout=2.5,
            buffer_size=128,
            banner="bye",
            log_level="DEBUG",
        )

    def test_from_env_malformed_values(self):
        """Test that malformed numbers fall back to defaults."""
        config = ServiceConfig.from_env({
            "CRONSPEAK_PORT": "six thousand",
            "CRONSPEAK_READ_TIMEOUT": "soon",
        })
        assert config.port == 6000
        assert config.read_timeout == 30.0

    def test_from_env_empty(self):
        """Test that an empty environment gives the defaults."""
        assert ServiceConfig.from_env({}) == ServiceConfig()

    @pytest.mark.parametrize(
        "kwargs",
        [{"port": 70000}, {"port": -1}, {"read_timeout": 0}, {"buffer_size": 0}],
    )
    def test_invalid_values(self, kwargs):
        """Test that out-of-range settings are rejected."""
        with pytest.raises(ValueError):
            ServiceConfig(**kwargs)

    def test_with_overrides_skips_none(self):
        """Test that None overrides keep the current value."""
        config = ServiceConfig().with_overrides(host=None, port=7001)
        assert config.host == "0.0.0.0"
        assert config.port == 7001


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_logs_to_stream(self):
        """Test that package records reach the given stream."""
        stream = io.StringIO()
        configure_logging("debug", stream=stream)
        logging.getLogger("cronspeak.server").debug("hello")
        assert "hello" in stream.getvalue()
        assert "[cronspeak.server]" in stream.getvalue()

    def test_reconfigure_replaces_handler(self):
        """Test that configuring twice installs one handler."""
        first, second = io.StringIO(), io.StringIO()
        configure_logging("info", stream=first)
        logger = configure_logging("info", stream=second)
        logger.info("once")
        assert first.getvalue() == ""
        assert "once" in second.getvalue()

    def test_reconfigure_keeps_other_handlers(self):
        """Test that handlers added by the application are left alone."""
        logger = logging.getLogger("cronspeak")
        other = logging.StreamHandler(io.StringIO())
        logger.addHandler(other)
        try:
            configure_logging("info", stream=io.StringIO())
            configure_logging("info", stream=io.StringIO())
            assert other in logger.handlers
            assert len(logger.handlers) == 2
        finally:
            logger.removeHandler(other)

    def test_unknown_level_defaults_to_info(self):
        """Test that an unknown level name falls back to INFO."""
        logger = configure_logging("chatty", stream=io.StringIO())
        assert logger.level == logging.INFO
