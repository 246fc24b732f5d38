"""
Ticker List Builder - Command Line Entry Point
==============================================

Downloads the NSE equity list, merges it with a local BSE list, drops BSE
symbols already listed on NSE and writes the result in numbered chunk files.

Usage:
    tickerlist                          # Run with config/settings.yaml and defaults
    tickerlist --chunk-size 500         # Smaller output files
    tickerlist --skip-download          # Reuse the nse.csv already on disk
    tickerlist --help                   # Show help
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from dotenv import load_dotenv
from tabulate import tabulate

from tickerlist.core.config import load_settings
from tickerlist.core.errors import TickerListError
from tickerlist.core.pipeline import run_pipeline
from tickerlist.models.symbol import PipelineResult
from tickerlist.utils.logger import get_logger, setup_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tickerlist",
        description="Build chunked NSE + BSE symbol lists for batch consumers",
    )
    parser.add_argument("--config", help="Path to settings.yaml (default: config/settings.yaml)")
    parser.add_argument("--url", dest="nse_url", help="NSE equity list CSV URL")
    parser.add_argument("--primary-file", help="Where to save the downloaded NSE list")
    parser.add_argument("--secondary-file", help="Existing BSE list CSV")
    parser.add_argument("--output-dir", help="Directory for the numbered .txt files")
    parser.add_argument("--chunk-size", type=int, help="Maximum symbols per output file")
    parser.add_argument("--timeout", type=float, help="Download timeout in seconds")
    parser.add_argument(
        "--skip-download",
        action="store_true",
        help="Use the NSE list already on disk instead of downloading it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: INFO)",
    )
    return parser.parse_args(argv)


def render_summary(result: PipelineResult) -> str:
    rows: List[List[object]] = [[str(chunk.path), chunk.symbol_count] for chunk in result.chunks]
    table = tabulate(rows, headers=["File", "Symbols"], tablefmt="grid")
    return f"{table}\n\nTotal merged symbols: {result.merged_count}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    try:
        settings = load_settings(
            args.config,
            nse_url=args.nse_url,
            primary_file=args.primary_file,
            secondary_file=args.secondary_file,
            output_dir=args.output_dir,
            chunk_size=args.chunk_size,
            timeout=args.timeout,
            log_level=args.log_level,
        )
    except TickerListError as exc:
        setup_logging()
        get_logger(__name__).error(f"Error: {exc.message}")
        return 1

    setup_logging(level=settings.log_level, config=settings.logging)
    log = get_logger(__name__)

    try:
        result = run_pipeline(settings, download=not args.skip_download)
    except TickerListError as exc:
        log.error(f"Error: {exc.message}")
        return 1

    print(render_summary(result))
    log.success(f"All symbol files saved to {settings.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
