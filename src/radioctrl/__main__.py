"""Command-line entry point for radioctrl."""

import argparse
import logging
import sys
from collections.abc import Sequence

from radioctrl.api.client import create_radio_browser
from radioctrl.api.errors import RadioBrowserError
from radioctrl.api.query import SearchRequest, StationQuery
from radioctrl.core.config import ConfigManager
from radioctrl.models.station import Station

logger = logging.getLogger(__name__)


def _parse_query(value: str) -> StationQuery:
    try:
        return StationQuery.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="radioctrl",
        description="radioctrl - search the radio-browser.info directory",
    )
    parser.add_argument(
        "term", nargs="?", default=None, help="search term (ignored for --query all)",
    )
    parser.add_argument(
        "-q", "--query", type=_parse_query, default=None,
        help="query kind, e.g. byname, bytagexact, bycountrycodeexact (default: last used)",
    )
    parser.add_argument("--order", default=None, help="sort field (e.g. votes, name)")
    parser.add_argument(
        "--reverse", action=argparse.BooleanOptionalAction, default=None,
        help="reverse sort order",
    )
    parser.add_argument("--offset", type=_non_negative, default=0, help="results to skip")
    parser.add_argument("--limit", type=_non_negative, default=None, help="maximum results")
    parser.add_argument(
        "--show-broken", action="store_true", help="include stations failing the server check",
    )
    parser.add_argument(
        "--click", action="store_true", help="register a click for the first result",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_station(station: Station) -> str:
    """Format a station as one table line."""
    codec = station.codec or "?"
    if station.bitrate:
        codec = f"{codec}/{station.bitrate}k"
    tags = ", ".join(station.tags[:3])
    broken = " [broken]" if station.is_broken else ""
    return (
        f"{station.display_name[:40]:<40}  {codec:<12}  {station.country_code or '--':<2}  "
        f"{tags}{broken}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one search from the command line.

    Returns:
        Exit code (0 for success).
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager()
    query: StationQuery = args.query if args.query is not None else config.get_last_query()
    term: str = args.term if args.term is not None else config.get_last_term()

    try:
        request = SearchRequest(
            query=query,
            search_term=term,
            order=args.order or config.get_order(),
            reverse=args.reverse if args.reverse is not None else config.get_reverse(),
            offset=args.offset,
            limit=args.limit if args.limit is not None else config.get_limit(),
            hide_broken=not args.show_broken and config.get_hide_broken(),
        )
        with create_radio_browser(config.get_timeout(), config.get_hostname()) as browser:
            logger.info("Searching %s (%s)", browser.mirror, query.description)
            stations = browser.search(request)
            config.set_last_search(query, term)
            config.sync()

            if not stations:
                print("No stations found.")
                return 0
            for station in stations:
                print(format_station(station))

            if args.click:
                result = browser.click_station(stations[0])
                status = "ok" if result.ok else "failed"
                print(f"Click {status}: {result.message} ({result.name})")
    except RadioBrowserError as e:
        print(f"radioctrl: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
