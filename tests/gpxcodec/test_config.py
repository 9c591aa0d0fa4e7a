"""Tests for environment-driven settings."""

import pytest

from gpxcodec.config import Settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("GPX_DEFAULT_VERSION", "GPX_DEFAULT_CREATOR", "GPX_STRICT_COORDINATES"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.default_version == "1.0"
        assert s.default_creator == "gpxcodec"
        assert s.pretty_indent == "\t"
        assert s.strict_coordinates is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("GPX_DEFAULT_CREATOR", "field-logger 2.0")
        monkeypatch.setenv("GPX_STRICT_COORDINATES", "true")
        s = Settings(_env_file=None)
        assert s.default_creator == "field-logger 2.0"
        assert s.strict_coordinates is True
