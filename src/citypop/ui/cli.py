from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from citypop.app import enrich_workbook
from citypop.common.logging import configure_logging
from citypop.config import (
    ConfigurationError,
    get_cascade_config,
    get_overpass_config,
    get_wikidata_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from citypop.config import CascadeConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Look up settlement populations in Wikidata and OpenStreetMap",
    )
    parser.add_argument("input", type=Path, help="Workbook with longitude, latitude, name columns")
    parser.add_argument("output", type=Path, help="Workbook to write the results to")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause between settlements (defaults to config)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Append-only error log (defaults to config)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(list(argv))


def _build_cascade_config(args: argparse.Namespace) -> CascadeConfig:
    config = get_cascade_config()
    if args.delay is not None:
        if args.delay < 0:
            raise ValueError("Delay must be non-negative")
        config = replace(config, delay_seconds=args.delay)
    if args.log_file is not None:
        config = replace(config, log_path=args.log_file)
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        cascade_config = _build_cascade_config(parsed_args)
        wikidata_config = get_wikidata_config()
        overpass_config = get_overpass_config()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        statistics = enrich_workbook(
            parsed_args.input,
            parsed_args.output,
            cascade_config=cascade_config,
            wikidata_config=wikidata_config,
            overpass_config=overpass_config,
        )
    except Exception:
        log.exception("Fatal error while resolving populations")
        sys.exit(1)

    for line in statistics.summary_lines():
        log.info(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
