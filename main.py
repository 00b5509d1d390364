import sys
import argparse
from typing import List, Optional

# --- Settings/Logging ---
from optional_records.logging.setup import setup_logging
from optional_records.config.settings import VALID_LOG_LEVELS, settings

from loguru import logger

# --- End Settings/Logging ---

from optional_records.demos.registry import DEMOS, Demo, find_demo, run_demo

from rich import print
from rich.panel import Panel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Optional result demos: lookups without None."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help=f"Demos to run (default: all). One of: {', '.join(DEMOS)}",
    )
    parser.add_argument(
        "--list", action="store_true", help="List the available demos and exit."
    )
    parser.add_argument(
        "--query",
        help=f"Name looked up by the finder demos (default: {settings.default_query}).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help=f"Override LOG_LEVEL (default: {settings.log_level}).",
    )
    return parser


def resolve_demos(parser: argparse.ArgumentParser, names: List[str]) -> List[Demo]:
    if not names:
        return list(DEMOS.values())
    return [
        find_demo(name).or_else_get(lambda: parser.error(f"unknown demo '{name}'"))
        for name in names
    ]


def show(demo: Demo, query: Optional[str]) -> None:
    """Runs one demo and prints its output in a panel."""
    logger.info(f"Running demo: {demo.name}")
    try:
        lines = run_demo(demo, query)
    except AttributeError as e:
        if not demo.fails_on_miss:
            raise
        # The None-returning lookup fails here on a miss
        logger.error(f"Demo '{demo.name}' hit a null reference: {e}")
        print(
            Panel(
                f"[bold red]AttributeError:[/bold red] {e}",
                title=demo.title,
                border_style="red",
            )
        )
        return

    body = "\n".join(lines) if lines else "[dim](no output)[/dim]"
    print(Panel(body, title=demo.title, border_style="green"))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the demos."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.list:
        for demo in DEMOS.values():
            print(f"[cyan]{demo.name:<12}[/cyan] {demo.title}")
        return

    for demo in resolve_demos(parser, args.demos):
        show(demo, args.query)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
