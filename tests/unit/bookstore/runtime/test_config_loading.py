"""Unit tests for configuration loading and templating."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.config.config_template import (
    apply_environment_overrides,
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)
from src.bookstore.runtime.settings import EnvironmentVariables


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert substitute_env_vars("${TEST_VAR}") == "test_value"

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("http://${HOST}:${PORT}/books")
            assert result == "http://localhost:8080/books"

    def test_default_used_when_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-fallback}") == "fallback"
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual"}):
            assert substitute_env_vars("${PRESENT_VAR:-fallback}") == "actual"

    def test_required_env_var_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_env_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR: set it first"):
                substitute_env_vars("${MISSING_VAR:?set it first}")


class TestEnvironmentOverrides:
    """Test <ENV>_ prefixed overrides."""

    def test_prefixed_variables_are_copied(self):
        with patch.dict(os.environ, {"PRODUCTION_LOG_LEVEL": "WARNING"}):
            applied = apply_environment_overrides("production")

            assert "LOG_LEVEL" in applied
            assert os.environ["LOG_LEVEL"] == "WARNING"


class TestLoadTemplatedYaml:
    """Test loading a config file."""

    def test_loads_sections(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    port: ${BOOKS_TEST_PORT:-9000}\n"
            "  books:\n"
            "    error_header: x-book-error\n"
        )

        with patch.dict(os.environ, {"APP_ENVIRONMENT": "test"}):
            config = load_templated_yaml(config_file)

        assert config.app.port == 9000
        assert config.books.error_header == "x-book-error"
        assert config.books.delete_all_message == "All the Books are successfully deleted!"
        assert config.logging.level == "INFO"

    def test_invalid_values_raise_value_error(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    port: not-a-port\n")

        with patch.dict(os.environ, {"APP_ENVIRONMENT": "test"}):
            with pytest.raises(ValueError, match="Invalid configuration"):
                load_templated_yaml(config_file)

    def test_empty_file_raises_value_error(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(config_file)

    def test_project_config_file_loads_in_clean_environment(self):
        """Should parse the shipped config.yaml with no variables set."""
        root = Path(__file__).resolve().parents[4]

        with patch.dict(os.environ, {}, clear=True):
            config = load_config(root / "config.yaml")

        assert config.app.environment == "development"
        assert config.app.port == 8000
        assert config.logging.file is None
        assert config.books.error_header == "error"
        assert config.app.cors.expose_headers == ["error", "X-Request-ID"]


class TestLoadConfig:
    """Test the config file lookup."""

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "absent.yaml") == ConfigData()

    def test_path_from_environment(self, tmp_path: Path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("config:\n  books:\n    error_header: reason\n")

        with patch.dict(os.environ, {"APP_CONFIG_FILE": str(config_file)}):
            assert load_config().books.error_header == "reason"


class TestEnvironmentVariables:
    """Test pydantic-settings environment loading."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            env = EnvironmentVariables(_env_file=None)

        assert env.environment == "development"
        assert env.log_level == "INFO"
        assert env.base_url == "http://localhost:8000"
        assert env.config_file == "config.yaml"

    def test_reads_aliases(self):
        with patch.dict(
            os.environ,
            {
                "APP_ENVIRONMENT": "production",
                "BASE_URL": "http://books:9000",
                "APP_CONFIG_FILE": "/etc/books.yaml",
            },
        ):
            env = EnvironmentVariables(_env_file=None)

        assert env.environment == "production"
        assert env.base_url == "http://books:9000"
        assert env.config_file == "/etc/books.yaml"
