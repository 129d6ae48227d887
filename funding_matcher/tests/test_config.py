"""Tests for configuration validation."""

import os
import pytest
from unittest.mock import patch

from funding_matcher.config import Config, load_config, validate_config


class TestConfigValidation:
    """Test startup config validation."""

    def test_defaults(self):
        env = {k: v for k, v in os.environ.items() if k not in ("LOG_LEVEL", "RULE_TABLES_PATH")}
        with patch.dict(os.environ, env, clear=True):
            config = Config(_env_file=None)
            assert config.log_level == "INFO"
            assert config.rule_tables_path is None

    def test_values_from_environment(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug", "RULE_TABLES_PATH": "/etc/rules.yaml"}):
            config = load_config()
            assert config.log_level == "DEBUG"
            assert config.rule_tables_path == "/etc/rules.yaml"

    def test_blank_rule_tables_path(self):
        with patch.dict(os.environ, {"RULE_TABLES_PATH": "  "}):
            assert validate_config().rule_tables_path is None

    def test_invalid_log_level_raises_error(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValueError) as exc_info:
                validate_config()
            assert "LOG_LEVEL" in str(exc_info.value)
