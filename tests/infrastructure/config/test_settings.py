"""Tests for application settings"""

import pytest
from pydantic import ValidationError

from apptimeline.infrastructure.config.settings import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.wire_format == "json"
        assert settings.xml_pretty_print is False
        assert settings.derive_start_time_from_events is True
        assert settings.debug is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("APPTIMELINE_WIRE_FORMAT", "XML")
        monkeypatch.setenv("APPTIMELINE_DEBUG", "1")

        settings = Settings()

        assert settings.wire_format == "xml"
        assert settings.debug is True

    def test_invalid_wire_format(self, monkeypatch):
        monkeypatch.setenv("APPTIMELINE_WIRE_FORMAT", "yaml")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
