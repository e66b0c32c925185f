"""
Command-line interface for calorie reports.

Usage:
    calorie-insights run [--input <file> | --url <url>] [options]
    python -m calorie_insights.cli.report_cli run --input data/calories.json
"""

import argparse
import sys

from pydantic import ValidationError

from calorie_insights.core.config import Settings, load_settings
from calorie_insights.core.decoding import RecordDecoder
from calorie_insights.core.reports import ReportRunner
from calorie_insights.ingest import HttpFetcher, SourceError, read_json_file
from calorie_insights.observability.logger import DEFAULT_LOGGER_NAME, get_logger, setup_logger
from calorie_insights.observability.metrics import write_metrics

from .formatting import format_bundle

logger = get_logger(__name__)


def load_document(args, settings: Settings) -> tuple[list, str]:
    """
    Obtain the raw JSON array from a file or over HTTP.

    Returns:
        (elements, source label)
    """
    if args.input:
        return read_json_file(args.input), "file"

    if args.url:
        fetcher = HttpFetcher(args.url, settings.source.timeout_seconds)
    else:
        fetcher = HttpFetcher.from_settings(settings.source)
    return fetcher.fetch_document(), "http"


def run_command(args) -> int:
    """
    Execute the run command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit status
    """
    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        document, source = load_document(args, settings)
    except SourceError as e:
        logger.error(str(e))
        return 1

    if not document:
        logger.warning("No data found in JSON")

    decoder = RecordDecoder(settings.decoder)
    logger.debug("Decoder configured", extra=decoder.get_field_summary())
    records = decoder.decode_batch(document, source=source)

    runner = ReportRunner(settings.reports)
    bundle = runner.run(records, parallel=args.parallel)

    for line in format_bundle(bundle, settings.reports):
        print(line)

    if args.metrics_file:
        write_metrics(args.metrics_file)
        logger.info(f"Wrote metrics to {args.metrics_file}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Calorie consumption reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Download the default document and print every report
  calorie-insights run

  # Use a local file and custom settings
  calorie-insights run --input data/calories.json --config config/reports.yaml

  # Compute reports on a thread pool and keep a metrics snapshot
  calorie-insights run --input data/calories.json --parallel --metrics-file metrics.prom
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Load records and print reports")
    source_group = run_parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--input",
        help="Path to a local JSON file"
    )
    source_group.add_argument(
        "--url",
        help="Document URL (default: source.url from settings)"
    )
    run_parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in settings)"
    )
    run_parser.add_argument(
        "--parallel",
        action="store_true",
        help="Compute reports concurrently"
    )
    run_parser.add_argument(
        "--log-format",
        default="json",
        choices=["json", "text"],
        help="Log format (default: json)"
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)"
    )
    run_parser.add_argument(
        "--metrics-file",
        default=None,
        help="Write a Prometheus metrics snapshot to this file"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Logs go to stderr so report output on stdout stays clean
    setup_logger(DEFAULT_LOGGER_NAME, level=args.log_level, format_type=args.log_format, stream=sys.stderr)

    if args.command == "run":
        return run_command(args)

    return 1


if __name__ == "__main__":
    sys.exit(main())
