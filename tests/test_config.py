"""
ClusterPulse Configuration and Logging Tests
"""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from clusterpulse.config import (
    ClusterPulseConfig,
    LogLevel,
    SerializationConfig,
    get_config,
    reset_config,
    set_config,
)
from clusterpulse.logging import setup_logging


class TestConfig:
    """Test configuration management."""

    def test_defaults(self):
        config = ClusterPulseConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_format == "json"
        assert config.serialization.timestamp_format == "epoch_millis"
        assert config.serialization.pretty is False
        assert config.serialization.max_depth == 32
        assert config.serialization.node_attributes is True

    def test_to_params(self):
        assert SerializationConfig(node_attributes=False).to_params() == {"node_attributes": False}

    def test_invalid_timestamp_format(self):
        with pytest.raises(ValidationError):
            SerializationConfig(timestamp_format="rfc822")

    def test_invalid_max_depth(self):
        with pytest.raises(ValidationError):
            SerializationConfig(max_depth=0)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CLUSTERPULSE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLUSTERPULSE_SERIALIZATION__TIMESTAMP_FORMAT", "iso8601")

        config = ClusterPulseConfig()
        assert config.log_level == LogLevel.DEBUG
        assert config.serialization.timestamp_format == "iso8601"

    def test_from_file(self, tmp_path):
        path = tmp_path / "clusterpulse.json"
        path.write_text(json.dumps({"serialization": {"pretty": True}}))

        config = ClusterPulseConfig.from_file(path)
        assert config.serialization.pretty is True

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ClusterPulseConfig.from_file(tmp_path / "missing.json")

    def test_global_accessors(self):
        default = get_config()
        assert get_config() is default

        custom = ClusterPulseConfig(log_format="console")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() is not custom


class TestLogging:
    """Test structlog setup."""

    @pytest.fixture(autouse=True)
    def _restore_structlog(self):
        root = logging.getLogger()
        level = root.level
        yield
        root.setLevel(level)
        structlog.reset_defaults()

    def test_setup_logging_json(self):
        setup_logging("debug", "json")
        assert structlog.is_configured()
        structlog.get_logger("clusterpulse.test").info("logging.configured")

    def test_setup_logging_console(self):
        setup_logging(LogLevel.WARNING, "console")
        assert structlog.is_configured()

    def test_setup_logging_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("verbose")

    def test_setup_logging_reads_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("CLUSTERPULSE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLUSTERPULSE_LOG_FORMAT", "console")

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_explicit_arguments_override_config(self):
        set_config(ClusterPulseConfig(log_level=LogLevel.DEBUG, log_format="console"))

        setup_logging(LogLevel.ERROR, "json")

        assert logging.getLogger().level == logging.ERROR
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)
