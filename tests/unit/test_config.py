"""Unit tests for the configuration module."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from gresql.config import ParsingConfig, Settings, load_settings


class TestParsingConfig:
    """Tests for ParsingConfig model."""

    def test_parsing_config_defaults(self):
        """Test the default pipeline components."""
        config = ParsingConfig()

        assert config.segmenter == "blank-line"
        assert config.identifier_normalizer == "none"

    def test_parsing_config_creation(self):
        """Test creating a ParsingConfig with explicit values."""
        config = ParsingConfig(segmenter="blank-line", identifier_normalizer="strip")
        assert config.identifier_normalizer == "strip"


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_settings(self):
        """Test Settings with default values."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.workers == 1
        assert settings.encoding == "utf-8-sig"
        assert settings.file_extensions == [".sql"]
        assert settings.delimiter == ","
        assert settings.include_select_by_default is False
        assert settings.parsing == ParsingConfig()

    def test_settings_custom_values(self):
        """Test Settings with custom values."""
        settings = Settings(workers=8, delimiter="|", file_extensions=[".sql", ".prc"])

        assert settings.workers == 8
        assert settings.delimiter == "|"
        assert settings.file_extensions == [".sql", ".prc"]

    def test_settings_from_environment(self):
        """Test that GRESQL_ environment variables override defaults."""
        with patch.dict(os.environ, {"GRESQL_WORKERS": "4", "GRESQL_DELIMITER": ";"}):
            settings = Settings()

        assert settings.workers == 4
        assert settings.delimiter == ";"


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_load_settings_with_no_config_file(self):
        """Test loading settings when config file doesn't exist."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            non_existent_config = os.path.join(tmp_dir, "non_existent.yaml")
            settings = load_settings(non_existent_config)

            assert isinstance(settings, Settings)
            assert settings.workers == 1
            assert settings.parsing.segmenter == "blank-line"

    def test_missing_explicit_config_file_warns(self, tmp_path, caplog):
        """Test that a config file named by the caller but absent is a warning."""
        load_settings(str(tmp_path / "typo.yaml"))

        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert "typo.yaml' not found" in warnings[0].getMessage()

    def test_missing_default_config_file_is_quiet(self, tmp_path, monkeypatch, caplog):
        """Test that an absent default gresql.yaml is only logged at DEBUG."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("GRESQL_CONFIG_FILE", raising=False)

        load_settings()

        assert not [r for r in caplog.records if r.levelname == "WARNING"]
        assert "gresql.yaml' not found" in caplog.text

    def test_load_settings_with_empty_config_file(self):
        """Test loading settings with empty config file."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = os.path.join(tmp_dir, "gresql.yaml")
            Path(config_path).write_text("")

            settings = load_settings(config_path)

            assert isinstance(settings, Settings)
            assert settings.delimiter == ","

    def test_load_settings_with_system_config(self):
        """Test loading settings with system configuration."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = os.path.join(tmp_dir, "gresql.yaml")
            config_content = """
system:
  workers: 4
  delimiter: "|"
  include_select_by_default: true
  file_extensions: [".sql", ".prc"]
  not_a_setting: ignored
"""
            Path(config_path).write_text(config_content)

            settings = load_settings(config_path)

            assert settings.workers == 4
            assert settings.delimiter == "|"
            assert settings.include_select_by_default is True
            assert settings.file_extensions == [".sql", ".prc"]
            assert not hasattr(settings, "not_a_setting")

    def test_load_settings_with_parsing_config(self):
        """Test loading settings with a parsing section."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = os.path.join(tmp_dir, "gresql.yaml")
            config_content = """
parsing:
  identifier_normalizer: strip
"""
            Path(config_path).write_text(config_content)

            settings = load_settings(config_path)

            assert settings.parsing.identifier_normalizer == "strip"
            assert settings.parsing.segmenter == "blank-line"

    def test_load_settings_from_environment_path(self):
        """Test that GRESQL_CONFIG_FILE selects the config file."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = os.path.join(tmp_dir, "custom.yaml")
            Path(config_path).write_text("system:\n  workers: 3\n")

            with patch.dict(os.environ, {"GRESQL_CONFIG_FILE": config_path}):
                settings = load_settings()

            assert settings.workers == 3
