"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

IMPORT_KINDS = ("survey", "branded")


class Settings(BaseSettings):
    """Importer settings loaded from environment variables."""

    food_supabase_url: str = Field(min_length=1)
    food_supabase_service_key: str = Field(min_length=1)
    food_table: str = Field(default="foods", min_length=1)
    usda_supabase_url: str = Field(min_length=1)
    usda_supabase_service_key: str = Field(min_length=1)
    usda_survey_table: str = Field(default="usda_survey_foods", min_length=1)
    usda_branded_table: str = Field(default="usda_branded_foods", min_length=1)
    import_batch_size: int = Field(default=1000, gt=0)
    source_page_size: int = Field(default=1000, gt=0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        str_strip_whitespace=True,
    )

    def source_table(self, kind: str) -> str:
        """Return the USDA table for an import kind."""
        if kind == "survey":
            return self.usda_survey_table
        if kind == "branded":
            return self.usda_branded_table
        raise ValueError(f"Unknown import type: {kind!r}")


def parse_import_kind(raw: str | None) -> str:
    """Parse the import type selector."""
    cleaned = (raw or "").strip().lower()
    if cleaned not in IMPORT_KINDS:
        raise ValueError("Import type must be 'survey' or 'branded'")
    return cleaned
