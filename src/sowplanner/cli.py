"""
Command line entry point.

Usage:
    sowplanner [--log-level LEVEL] COMMAND ...
    sowplanner single --url URL [--output record.json]
    sowplanner batch --file roster.csv --json-dir data/records
    sowplanner export --input-file roster.csv --output-file calendar.csv --json-dir data/records
"""
import argparse
import sys
from datetime import date
from typing import List, Optional

from src.sowplanner.exceptions import BlockedPageError, FetchError, SowPlannerError
from src.sowplanner.pipelines.batch_scrape import BatchScraper
from src.sowplanner.pipelines.export import ExportPipeline
from src.sowplanner.pipelines.single_scrape import scrape_single
from src.sowplanner.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sowplanner",
        description="Scrape seed product pages and export a sowing calendar",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    single = subparsers.add_parser("single", help="Scrape a single URL")
    single.add_argument("-u", "--url", required=True, help="Product page URL")
    single.add_argument("-o", "--output", default=None, help="Optional path to save the JSON record")

    batch = subparsers.add_parser("batch", help="Scrape every plant in a roster CSV")
    batch.add_argument("-f", "--file", required=True, help="Roster CSV with plant names and URLs")
    batch.add_argument("-j", "--json-dir", required=True, help="Directory for JSON records")

    export = subparsers.add_parser("export", help="Export stored records joined with the roster to CSV")
    export.add_argument("-i", "--input-file", required=True, help="Roster CSV")
    export.add_argument("-o", "--output-file", required=True, help="Destination CSV")
    export.add_argument("-j", "--json-dir", required=True, help="Directory of JSON records")
    export.add_argument(
        "--frost-date",
        type=date.fromisoformat,
        default=None,
        help="Average last frost date, YYYY-MM-DD (default from settings)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level)

    if args.command == "single":
        try:
            record = scrape_single(args.url, output=args.output)
        except BlockedPageError:
            logger.error("single_scrape_blocked", url=args.url)
            print("Error: Access blocked by Cloudflare protection", file=sys.stderr)
            print("Try again later or verify the URL is correct", file=sys.stderr)
            return 1
        except FetchError as e:
            logger.error("single_scrape_failed", url=args.url, error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(record.to_json())
        return 0

    try:
        if args.command == "batch":
            result = BatchScraper(records_dir=args.json_dir).run(args.file)
            if result.failed:
                print("\nFailed to process the following plants:", file=sys.stderr)
                for name in result.failed:
                    print(f"- {name}", file=sys.stderr)
            else:
                print("All plants processed successfully.")
        else:
            result = ExportPipeline(records_dir=args.json_dir, frost_date=args.frost_date).run(
                args.input_file, args.output_file
            )
            print(
                f"Processed {result.total} plants "
                f"({result.missing} with missing JSON data marked as ERR)"
            )
    except SowPlannerError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
