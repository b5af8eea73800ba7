"""Batched streaming import of USDA foods into the food store."""

import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import ValidationError

from usda_importer.domain.foods import FoodRecord
from usda_importer.domain.usda import BrandedFood, SurveyFood
from usda_importer.services.mapper import map_branded_food, map_survey_food

DEFAULT_BATCH_SIZE = 1000

_logger = logging.getLogger(__name__)


class FoodSource(Protocol):
    """Read interface for raw USDA documents."""

    def count(self) -> int:
        """Return the total number of source documents."""

    def iter_documents(self) -> Iterator[dict[str, object]]:
        """Yield raw source documents in a stable order."""


class FoodSink(Protocol):
    """Write interface for normalized food records."""

    def insert_foods(self, foods: list[FoodRecord]) -> None:
        """Insert a non-empty batch of food records in one bulk write."""


@dataclass(frozen=True)
class ImportProfile:
    """Per-dataset decode and map steps for the import pipeline."""

    kind: str
    label: str
    decode: Callable[[dict[str, object]], SurveyFood | BrandedFood]
    map_record: Callable[[Any, int], FoodRecord]


SURVEY_PROFILE = ImportProfile(
    kind="survey",
    label="survey foods",
    decode=SurveyFood.model_validate,
    map_record=map_survey_food,
)

BRANDED_PROFILE = ImportProfile(
    kind="branded",
    label="branded foods",
    decode=BrandedFood.model_validate,
    map_record=map_branded_food,
)

_PROFILES = {profile.kind: profile for profile in (SURVEY_PROFILE, BRANDED_PROFILE)}


def profile_for(kind: str) -> ImportProfile:
    """Return the import profile for a dataset kind."""
    try:
        return _PROFILES[kind]
    except KeyError:
        raise ValueError(f"Unknown import type: {kind!r}") from None


@dataclass(frozen=True)
class ImportResult:
    """Counts accumulated by an import run."""

    imported: int = 0
    skipped: int = 0
    decode_failures: int = 0
    batches: int = 0


@dataclass(frozen=True)
class ImportReport:
    """Summary of a finished or aborted run."""

    kind: str
    total_records: int
    result: ImportResult
    duration_seconds: float

    @property
    def rate(self) -> float:
        """Imported records per second."""
        if self.duration_seconds <= 0:
            return 0.0
        return self.result.imported / self.duration_seconds

    def summary_lines(self, title: str = "Import Complete") -> list[str]:
        """Return the human-readable run summary."""
        return [
            f"=== {title} ===",
            f"Import type: {self.kind}",
            f"Total records processed: {self.total_records}",
            f"Successfully imported: {self.result.imported}",
            f"Skipped (empty nutrients): {self.result.skipped}",
            f"Decode failures: {self.result.decode_failures}",
            f"Duration: {self.duration_seconds:.2f}s",
            f"Rate: {self.rate:.2f} records/second",
        ]


class ImportAborted(Exception):
    """Base error for an import run that ended early."""

    def __init__(self, message: str, result: ImportResult) -> None:
        super().__init__(message)
        self.result = result


class SinkWriteError(ImportAborted):
    """A bulk write to the food store failed."""


class SourceReadError(ImportAborted):
    """Reading from the USDA source failed."""


class ImportCancelled(ImportAborted):
    """The run was cancelled before the source was exhausted."""


@dataclass
class _ImportState:
    """Mutable counters owned by a single run."""

    imported: int = 0
    skipped: int = 0
    decode_failures: int = 0
    batches: int = 0
    next_id: int = 1
    batch: list[FoodRecord] = field(default_factory=list)

    def snapshot(self) -> ImportResult:
        return ImportResult(
            imported=self.imported,
            skipped=self.skipped,
            decode_failures=self.decode_failures,
            batches=self.batches,
        )


@dataclass
class ImportService:
    """Streams source documents through decode, filter, map and batched insert."""

    source: FoodSource
    sink: FoodSink
    profile: ImportProfile
    batch_size: int = DEFAULT_BATCH_SIZE

    def __post_init__(self) -> None:
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")

    def run(self, cancel_event: threading.Event | None = None) -> ImportResult:
        """Import every source document and return the final counts.

        Raises SinkWriteError, SourceReadError or ImportCancelled carrying the
        counts reached before the run stopped. Batches already written stay
        in the sink.
        """
        state = _ImportState()
        documents = self.source.iter_documents()
        while True:
            self._check_cancelled(state, cancel_event)
            try:
                raw = next(documents)
            except StopIteration:
                break
            except Exception as exc:
                raise SourceReadError(
                    f"Failed to read USDA {self.profile.label}: {exc}",
                    state.snapshot(),
                ) from exc
            self._accept(state, raw)
            if len(state.batch) >= self.batch_size:
                self._check_cancelled(state, cancel_event)
                self._flush(state, final=False)

        if state.batch:
            self._check_cancelled(state, cancel_event)
            self._flush(state, final=True)
        _logger.info(
            "Finished %s: imported=%s skipped=%s decode_failures=%s",
            self.profile.label,
            state.imported,
            state.skipped,
            state.decode_failures,
        )
        return state.snapshot()

    def _check_cancelled(
        self, state: _ImportState, cancel_event: threading.Event | None
    ) -> None:
        if cancel_event is None or not cancel_event.is_set():
            return
        _logger.warning(
            "Import of %s cancelled; %s pending records not written",
            self.profile.label,
            len(state.batch),
        )
        raise ImportCancelled("Import cancelled", state.snapshot())

    def _accept(self, state: _ImportState, raw: dict[str, object]) -> None:
        """Decode, filter and map one document into the pending batch."""
        try:
            record = self.profile.decode(raw)
        except ValidationError as exc:
            state.decode_failures += 1
            _logger.warning(
                "Failed to decode %s food (fdcId=%s): %s",
                self.profile.kind,
                raw.get("fdcId") if isinstance(raw, dict) else None,
                _first_error(exc),
            )
            return

        if not record.food_nutrients:
            state.skipped += 1
            return

        state.batch.append(self.profile.map_record(record, state.next_id))
        state.next_id += 1

    def _flush(self, state: _ImportState, *, final: bool) -> None:
        """Write the pending batch to the sink."""
        try:
            self.sink.insert_foods(state.batch)
        except Exception as exc:
            which = "final batch" if final else "batch"
            raise SinkWriteError(
                f"Failed to insert {which}: {exc}", state.snapshot()
            ) from exc
        state.imported += len(state.batch)
        state.batches += 1
        state.batch = []
        _logger.info("Imported %s %s...", state.imported, self.profile.label)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    location = ".".join(str(part) for part in errors[0].get("loc", ()))
    message = errors[0].get("msg", "")
    return f"{location}: {message}" if location else message
