"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from harsnip.config import HarsnipSettings, get_settings, reset_settings


class TestSettingsDefaults:
    """Tests for default HarsnipSettings values."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.preview_theme == "monokai"
        assert settings.line_numbers is False
        assert settings.default_index == 0
        assert settings.telemetry is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings_creates_new_instance(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first


class TestSettingsEnvironment:
    """Tests for HARSNIP_ environment variables."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("HARSNIP_LOG_FORMAT", "json")
        monkeypatch.setenv("HARSNIP_PREVIEW_THEME", "native")
        monkeypatch.setenv("HARSNIP_LINE_NUMBERS", "true")
        monkeypatch.setenv("HARSNIP_DEFAULT_INDEX", "2")
        monkeypatch.setenv("HARSNIP_TELEMETRY", "false")
        reset_settings()
        settings = get_settings()

        assert settings.log_format == "json"
        assert settings.preview_theme == "native"
        assert settings.line_numbers is True
        assert settings.default_index == 2
        assert settings.telemetry is False

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("HARSNIP_LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            HarsnipSettings()

    def test_negative_default_index(self, monkeypatch):
        monkeypatch.setenv("HARSNIP_DEFAULT_INDEX", "-1")
        with pytest.raises(ValidationError):
            HarsnipSettings()

    def test_dotenv_file(self, tmp_path):
        """Settings are read from .env in the working directory."""
        (tmp_path / ".env").write_text("HARSNIP_PREVIEW_THEME=dracula\n")
        reset_settings()
        assert get_settings().preview_theme == "dracula"

    def test_unknown_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("HARSNIP_NOT_A_SETTING", "1")
        reset_settings()
        assert get_settings().log_level == "WARNING"
