"""Tests for configuration helpers."""

import pytest
from pydantic import ValidationError

from usda_nutrition.config import Settings, parse_allowed_origins


def test_settings_defaults(settings: Settings) -> None:
    assert settings.fdc_base_url == "https://api.nal.usda.gov/fdc/v1"
    assert settings.unit_scan_whole_input is True
    assert settings.cors_allow_origins == "*"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FDC_API_KEY", "env-key")
    monkeypatch.setenv("UNIT_SCAN_WHOLE_INPUT", "false")

    settings = Settings(_env_file=None)

    assert settings.fdc_api_key == "env-key"
    assert settings.unit_scan_whole_input is False


def test_settings_require_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FDC_API_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("raw", [None, "", " * "])
def test_parse_allowed_origins_wildcard(raw: str | None) -> None:
    assert parse_allowed_origins(raw) == ["*"]


def test_parse_allowed_origins_list() -> None:
    raw = "http://localhost:3000, http://10.0.2.2:3000/,,http://localhost:3000"

    assert parse_allowed_origins(raw) == [
        "http://localhost:3000",
        "http://10.0.2.2:3000",
    ]
