# main.py

"""Entry point for PriceTrack (TUI dashboard or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("price_track.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    platform_ids = [p["id"] for p in Settings.AVAILABLE_PLATFORMS]

    parser = argparse.ArgumentParser(
        prog="price_track",
        description="Track e-commerce product prices.",
        epilog=f"Platforms: {', '.join(platform_ids)}",
    )
    sub = parser.add_subparsers(dest="command")

    list_cmd = sub.add_parser("list", help="List tracked products.")
    list_cmd.add_argument(
        "-q",
        "--query",
        default="",
        help="Case-insensitive name filter (default: all).",
    )
    list_cmd.add_argument(
        "-s",
        "--sort",
        choices=["name", "price"],
        default="name",
        help="Sort order (default: name).",
    )
    list_cmd.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )

    chart_cmd = sub.add_parser(
        "chart", help="Export a product's price-history chart."
    )
    chart_cmd.add_argument("product_id", type=int)
    chart_cmd.add_argument(
        "--no-browser",
        action="store_false",
        dest="open_browser",
        help="Write the chart without opening it.",
    )

    track_cmd = sub.add_parser("track", help="Start tracking a product.")
    track_cmd.add_argument("url")
    track_cmd.add_argument("platform", choices=platform_ids)
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual dashboard."""
    from src.ui.app import PriceTrackApp

    try:
        app = PriceTrackApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("PriceTrack TUI shutting down")


def _run_command(args: argparse.Namespace) -> int:
    """Dispatch a headless subcommand and return its exit code."""
    from src.cli import runner

    if args.command == "list":
        return runner.run_list(args.query, args.sort, args.output_format)
    if args.command == "chart":
        return runner.run_chart(args.product_id, args.open_browser)
    return runner.run_track(args.url, args.platform)


def main() -> None:
    """Route to the TUI (no subcommand) or a headless command."""
    log_file = setup_logging()
    logger.info("PriceTrack starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        _run_tui()
    else:
        sys.exit(_run_command(args))


if __name__ == "__main__":
    main()
