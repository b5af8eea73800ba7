"""Tests for importer configuration."""

import pytest
from pydantic import ValidationError

from usda_importer.config import Settings, parse_import_kind

_REQUIRED_ENV = (
    "FOOD_SUPABASE_URL",
    "FOOD_SUPABASE_SERVICE_KEY",
    "USDA_SUPABASE_URL",
    "USDA_SUPABASE_SERVICE_KEY",
)


def test_parse_import_kind_accepts_known_kinds() -> None:
    assert parse_import_kind("survey") == "survey"
    assert parse_import_kind(" Branded ") == "branded"


@pytest.mark.parametrize("raw", [None, "", "foundation", "sr_legacy"])
def test_parse_import_kind_rejects_unknown(raw: str | None) -> None:
    with pytest.raises(ValueError):
        parse_import_kind(raw)


def test_settings_defaults(settings: Settings) -> None:
    assert settings.food_table == "foods"
    assert settings.import_batch_size == 1000
    assert settings.source_table("survey") == "usda_survey_foods"
    assert settings.source_table("branded") == "usda_branded_foods"
    with pytest.raises(ValueError):
        settings.source_table("foundation")


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _REQUIRED_ENV:
        monkeypatch.setenv(name, f"value-for-{name.lower()}")
    monkeypatch.setenv("USDA_BRANDED_TABLE", "branded_2024")
    monkeypatch.setenv("IMPORT_BATCH_SIZE", "250")

    settings = Settings(_env_file=None)

    assert settings.usda_branded_table == "branded_2024"
    assert settings.import_batch_size == 250


def test_settings_missing_connection_values(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _REQUIRED_ENV:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_empty_values(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _REQUIRED_ENV:
        monkeypatch.setenv(name, "configured")
    monkeypatch.setenv("FOOD_SUPABASE_URL", "   ")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
