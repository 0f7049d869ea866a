"""
Catalog Report - Product Catalog Summary

CLI entry point for running the report pipeline.
"""

import argparse
import logging
import math
import sys

from catalog_report.errors import EmptyResultError, SourceReadError
from catalog_report.orchestrator import ReportPipeline
from catalog_report.utils.rendering import render_console
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def finite_float(value: str) -> float:
    """argparse type for thresholds: a float that is neither NaN nor infinite."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Catalog Report - product catalog summary generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize products.csv with defaults (min price 0, top 5)
  python main.py

  # In-stock products above 100, top 3 most expensive
  python main.py --input products.csv --min-price 100 --top 3

  # Count and rank only the filtered products
  python main.py -m 50 --scope filtered --output-dir reports
        """
    )

    parser.add_argument(
        "--input", "-i",
        default=str(settings.DEFAULT_INPUT_PATH),
        help=f"Catalog file to read (default: {settings.DEFAULT_INPUT_PATH})"
    )

    parser.add_argument(
        "--min-price", "--minPrice", "-m",
        dest="min_price",
        type=finite_float,
        default=settings.DEFAULT_MIN_PRICE,
        help=f"Minimum price filter for in-stock products (default: {settings.DEFAULT_MIN_PRICE})"
    )

    parser.add_argument(
        "--top", "-t",
        type=int,
        default=settings.DEFAULT_TOP_N,
        help=f"Number of top expensive products to display (default: {settings.DEFAULT_TOP_N})"
    )

    parser.add_argument(
        "--output-dir", "-o",
        default=str(settings.OUTPUT_ROOT),
        help=f"Directory for report files (default: {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--scope",
        default=settings.AGGREGATION_SCOPE,
        choices=settings.AGGREGATION_SCOPES,
        help="Products counted per category and ranked for top-N "
             f"(default: {settings.AGGREGATION_SCOPE})"
    )

    parser.add_argument(
        "--delimiter",
        default=settings.CSV_DELIMITER,
        help=f"Field delimiter of the catalog (default: '{settings.CSV_DELIMITER}')"
    )

    parser.add_argument(
        "--no-rejected-log",
        dest="write_rejected_log",
        action="store_false",
        help="Do not write the rejected-rows log"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        pipeline = ReportPipeline(
            output_dir=args.output_dir,
            delimiter=args.delimiter,
            write_rejected_log=args.write_rejected_log
        )

        run = pipeline.run(
            input_path=args.input,
            min_price=args.min_price,
            top_n=args.top,
            scope=args.scope
        )

    except SourceReadError as e:
        logger.error(f"Source read failed: {e}")
        print(f"\n❌ Error reading catalog: {e}")
        return 1

    except EmptyResultError as e:
        logger.warning(str(e))
        print(f"\n⚠️  {e}. No reports written.")
        return 1

    except KeyboardInterrupt:
        logger.warning("Run interrupted by user")
        print("\n⚠️  Run interrupted")
        return 1

    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        print(f"\n❌ Run failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        return 1

    print("✅ CSV successfully loaded.\n")
    if run.rejected:
        print(f"⚠️  Skipped {len(run.rejected)} malformed row(s)\n")

    print(render_console(run.report))

    print("📁 Reports saved:")
    for path in run.written.values():
        print(f"- {path}")

    logger.info("Catalog Report completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())


# Design Rationale and Trade-offs:
#
# 1. Why argparse instead of click or typer?
#    - Standard library, same as the rest of the CLI plumbing
#    - Flags are few and flat (no subcommands)
#    - Trade-off: Less polished help output
#
# 2. Why keep --minPrice next to --min-price?
#    - Existing invocations of the original tool keep working
#    - Trade-off: Two spellings show up in --help
#
# 3. Why reject NaN/inf thresholds at parse time?
#    - NaN compares false against every price, so the filtered view would be empty
#    - Trade-off: None, a finite threshold is always expressible
#
# 4. Why exit 1 for an empty catalog instead of 0?
#    - No reports are written, so shell callers must not treat the run as done
#    - Trade-off: Same code as a read failure; the printed message tells them apart
