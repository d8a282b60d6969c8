"""Tests for library settings."""

import pickle

from ddd_commons.config import DddCommonsSettings, get_settings


class TestDddCommonsSettings:
    """Test cases for DddCommonsSettings."""

    def test_defaults(self):
        settings = DddCommonsSettings()

        assert settings.log_level == "INFO"
        assert settings.log_verbosity == "NORMAL"
        assert settings.log_format == "simple"
        assert settings.default_page_size == 10
        assert settings.page_max_size == 1000
        assert settings.pickle_protocol == pickle.HIGHEST_PROTOCOL
        assert settings.serializer_compression is False
        assert settings.serializer_compression_threshold == 1024
        assert settings.json_ensure_ascii is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DDD_COMMONS_PAGE_MAX_SIZE", "250")
        monkeypatch.setenv("ddd_commons_log_format", "json")

        settings = DddCommonsSettings()

        assert settings.page_max_size == 250
        assert settings.log_format == "json"

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("DDD_COMMONS_DEFAULT_PAGE_SIZE", "30")

        assert get_settings() is first
        assert get_settings().default_page_size == 10

        get_settings.cache_clear()
        assert get_settings().default_page_size == 30
