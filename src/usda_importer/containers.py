"""Dependency container wiring for an import run."""

from dataclasses import dataclass

from supabase import create_client

from usda_importer.adapters.supabase_food_repository import SupabaseFoodRepository
from usda_importer.adapters.supabase_usda_source import SupabaseUsdaSource
from usda_importer.config import Settings
from usda_importer.services.importer import (
    FoodSink,
    FoodSource,
    ImportService,
    profile_for,
)


@dataclass
class ImporterContainer:
    """Holds the dependencies for one import run."""

    settings: Settings
    kind: str
    source: FoodSource
    sink: FoodSink
    import_service: ImportService


def build_container(
    kind: str, settings: Settings | None = None, batch_size: int | None = None
) -> ImporterContainer:
    """Create the default container for an import kind."""
    resolved_settings = settings or Settings()
    profile = profile_for(kind)
    food_client = create_client(
        resolved_settings.food_supabase_url, resolved_settings.food_supabase_service_key
    )
    usda_client = create_client(
        resolved_settings.usda_supabase_url, resolved_settings.usda_supabase_service_key
    )
    source = SupabaseUsdaSource(
        client=usda_client,
        table=resolved_settings.source_table(kind),
        page_size=resolved_settings.source_page_size,
    )
    sink = SupabaseFoodRepository(client=food_client, table=resolved_settings.food_table)
    import_service = ImportService(
        source=source,
        sink=sink,
        profile=profile,
        batch_size=batch_size or resolved_settings.import_batch_size,
    )
    return ImporterContainer(
        settings=resolved_settings,
        kind=kind,
        source=source,
        sink=sink,
        import_service=import_service,
    )
