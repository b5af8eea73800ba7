"""Supabase source of raw USDA FoodData Central documents."""

from collections.abc import Iterator
from dataclasses import dataclass

from supabase import Client

from usda_importer.services.importer import FoodSource


@dataclass
class SupabaseUsdaSource(FoodSource):
    """Pages through a USDA table holding FDC JSON documents."""

    client: Client
    table: str
    page_size: int = 1000
    order_column: str = "fdcId"

    def count(self) -> int:
        """Return the exact row count of the USDA table."""
        response = (
            self.client.table(self.table)
            .select(self.order_column, count="exact")
            .limit(1)
            .execute()
        )
        return int(response.count or 0)

    def iter_documents(self) -> Iterator[dict[str, object]]:
        """Yield rows page by page until an empty page is returned.

        The server may cap a response below page_size, so the offset advances
        by the rows actually received.
        """
        start = 0
        while True:
            response = (
                self.client.table(self.table)
                .select("*")
                .order(self.order_column, desc=False)
                .range(start, start + self.page_size - 1)
                .execute()
            )
            rows = response.data or []
            if not rows:
                return
            yield from rows
            start += len(rows)
