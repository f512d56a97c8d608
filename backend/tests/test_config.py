"""
Rocks API — Settings Tests
============================

What:  Environment overrides and validation of the pydantic-settings model.
"""

import pytest
from pydantic import ValidationError

from rocks_api.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("HOST", raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.host == "0.0.0.0"

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings(_env_file=None).port == 8080

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("port", ["0", "70000", "http"])
    def test_invalid_port_rejected(self, monkeypatch, port):
        monkeypatch.setenv("PORT", port)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
