"""Tests for settings loading and validation."""

import pytest
from pydantic import ValidationError

from partpicker.config import Settings, get_settings


class TestSettings:
    """Environment-driven configuration."""

    def test_defaults(self, settings):
        """Out of the box the page matches the reference behaviour."""
        assert settings.page_name == "Index"
        assert settings.marker_class == "form-check-input"
        assert settings.checked_policy == "even-id"
        assert settings.aria_mode == "toggle"
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_reads_environment(self, monkeypatch):
        """PARTPICKER_* variables override the defaults."""
        monkeypatch.setenv("PARTPICKER_PAGE_NAME", "Parts")
        monkeypatch.setenv("PARTPICKER_ARIA_MODE", "force-false")
        monkeypatch.setenv("PARTPICKER_JSON_LOGS", "true")
        monkeypatch.setenv("PARTPICKER_PORT", "9000")

        settings = Settings(_env_file=None)

        assert settings.page_name == "Parts"
        assert settings.aria_mode == "force-false"
        assert settings.json_logs is True
        assert settings.port == 9000

    def test_reads_env_file(self, tmp_path):
        """A .env file is honoured."""
        env_file = tmp_path / ".env"
        env_file.write_text("PARTPICKER_CHECKED_POLICY=none\nUNRELATED=1\n")

        assert Settings(_env_file=env_file).checked_policy == "none"

    @pytest.mark.parametrize("field, value", [
        ("checked_policy", "odd-id"),
        ("aria_mode", "sticky"),
        ("marker_class", "two classes"),
        ("marker_class", ""),
        ("marker_class", "form-check-input\n"),
    ])
    def test_rejects_unknown_names(self, field, value):
        """Typos fail at load time."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_log_level_normalised(self):
        """Lower-case levels are accepted."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_get_settings_cached(self):
        """The same instance is returned until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
