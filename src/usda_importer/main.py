"""Command-line entrypoint for USDA food imports."""

import argparse
import logging
import signal
import threading
import time
from collections.abc import Callable

from pydantic import ValidationError

from usda_importer.app_logging import configure_logging
from usda_importer.config import IMPORT_KINDS, Settings, parse_import_kind
from usda_importer.containers import ImporterContainer, build_container
from usda_importer.services.importer import (
    ImportAborted,
    ImportCancelled,
    ImportReport,
    ImportResult,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130

_logger = logging.getLogger(__name__)

ContainerFactory = Callable[[str, Settings, int | None], ImporterContainer]


def main(
    argv: list[str] | None = None,
    container_factory: ContainerFactory = build_container,
    settings_factory: Callable[[], Settings] = Settings,
) -> int:
    """Run one import and return the process exit code."""
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        settings = settings_factory()
    except ValidationError as exc:
        missing = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        _logger.error("Invalid configuration, check environment variables: %s", missing)
        return EXIT_FAILURE

    try:
        _logger.info("Connecting to Food and USDA databases...")
        container = container_factory(args.type, settings, args.batch_size)
        total_records = container.source.count()
    except Exception:
        _logger.exception("Failed to connect to Food or USDA database")
        return EXIT_FAILURE

    _logger.info("Found %s %s foods to import", total_records, args.type)
    _logger.info("Starting import of %s foods...", args.type)

    cancel_event = threading.Event()
    previous_handler = _install_cancel_handler(cancel_event)
    started = time.monotonic()
    try:
        result = container.import_service.run(cancel_event)
    except ImportCancelled as exc:
        _report(args.type, total_records, exc.result, started, "Import Cancelled")
        return EXIT_CANCELLED
    except ImportAborted as exc:
        _logger.error("Import failed: %s", exc)
        _report(args.type, total_records, exc.result, started, "Import Failed")
        return EXIT_FAILURE
    finally:
        _restore_cancel_handler(previous_handler)

    _report(args.type, total_records, result, started, "Import Complete")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usda-import",
        description="Import USDA survey or branded foods into the food store.",
    )
    parser.add_argument(
        "--type",
        required=True,
        type=_import_kind,
        metavar="{" + ",".join(IMPORT_KINDS) + "}",
        help="Type of import",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=None,
        help="Records per bulk insert (defaults to IMPORT_BATCH_SIZE)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-record details such as unusable serving sizes",
    )
    return parser


def _import_kind(raw: str) -> str:
    try:
        return parse_import_kind(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _install_cancel_handler(
    cancel_event: threading.Event,
) -> Callable[..., object] | int | None:
    if threading.current_thread() is not threading.main_thread():
        return None

    def handle(_signum: int, _frame: object) -> None:
        _logger.warning("Interrupt received, stopping after the current record")
        cancel_event.set()

    return signal.signal(signal.SIGINT, handle)


def _restore_cancel_handler(previous: Callable[..., object] | int | None) -> None:
    if previous is not None:
        signal.signal(signal.SIGINT, previous)


def _report(
    kind: str, total_records: int, result: ImportResult, started: float, title: str
) -> None:
    report = ImportReport(
        kind=kind,
        total_records=total_records,
        result=result,
        duration_seconds=time.monotonic() - started,
    )
    for line in report.summary_lines(title):
        _logger.info(line)


def run() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
