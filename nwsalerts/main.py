"""Main entry point for the nwsalerts viewer."""
import argparse
import asyncio
import locale
import sys

import structlog

from .collectors.alert_collector import AlertCollector
from .collectors.nws_feed import AlertFetcher
from .config.config_manager import DEFAULT_CONFIG_PATH, ConfigManager
from .core.log_setup import configure_logging
from .core.models import SortColumn, SortDirection
from .core.view_store import ViewState, ViewStore
from .ui.console_display import ConsoleDisplay
from .ui.display_manager import AlertsApp

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="National Weather Service alert viewer")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--url", help="alert feed URL (overrides config)")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", help="write logs here instead of stderr")
    parser.add_argument("--print", dest="print_once", action="store_true",
                        help="print the table once instead of starting the UI")
    parser.add_argument("--filter", default="", help="severity filter for --print")
    parser.add_argument("--sort", choices=[c.value for c in SortColumn],
                        help="sort column for --print")
    parser.add_argument("--desc", action="store_true", help="sort descending for --print")
    return parser


def set_collation_locale():
    """Sort text columns by the user's locale rather than codepoints."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("collation_locale_unavailable", error=str(exc))


def print_alerts(config, fetcher: AlertFetcher, filter_text: str,
                 sort_column: SortColumn, sort_direction: SortDirection) -> int:
    """Fetch once, print the derived table and return the exit status."""
    store = ViewStore(ViewState(
        filter_text=filter_text,
        sort_column=sort_column,
        sort_direction=sort_direction,
    ))
    asyncio.run(AlertCollector(fetcher, store).collect())
    ok = ConsoleDisplay(config).show(store.state)
    return 0 if ok else 1


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    if args.url:
        config.feed.url = args.url
    if args.no_color:
        config.display.show_colors = False
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_file:
        config.logging.file = args.log_file

    log_stream = configure_logging(config.logging.level, config.logging.file)
    logger.debug("config_loaded", path=args.config, url=config.feed.url)
    set_collation_locale()

    fetcher = AlertFetcher(config.feed)
    try:
        if args.print_once:
            sort_column = SortColumn(args.sort) if args.sort else config.display.default_sort_column
            sort_direction = SortDirection.DESC if args.desc else config.display.default_sort_direction
            return print_alerts(config, fetcher, args.filter, sort_column, sort_direction)

        AlertsApp(config, fetcher).run()
        return 0
    except KeyboardInterrupt:
        return 130
    finally:
        if log_stream is not None:
            log_stream.close()


if __name__ == "__main__":
    sys.exit(main())
