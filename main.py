"""Betfair market viewer."""

import argparse
import logging
import sys

from betfair import (
    MarketFilter,
    MarketProjection,
    MarketSort,
    PriceData,
    PriceProjection,
    ProjectionParams,
    create_client,
)
from formatting import (
    catalogue_table,
    console,
    event_types_table,
    events_table,
    header,
    info,
    market_book_table,
    section,
    usage_panel,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse Betfair Exchange markets")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log request payloads and result counts",
    )

    subparsers = parser.add_subparsers(dest="command", help="What to list")

    subparsers.add_parser("event-types", help="List event types (sports)")

    events_parser = subparsers.add_parser("events", help="List events for an event type")
    events_parser.add_argument(
        "--event-type", required=True, help="Event type ID (e.g. 1 for Soccer)"
    )
    events_parser.add_argument(
        "--country",
        action="append",
        default=[],
        help="Market country code, may be repeated (e.g. GB)",
    )

    catalogue_parser = subparsers.add_parser(
        "catalogue", help="List markets for an event type or event"
    )
    catalogue_parser.add_argument("--event-type", help="Event type ID")
    catalogue_parser.add_argument("--event", help="Event ID")
    catalogue_parser.add_argument(
        "--max",
        type=int,
        default=10,
        help="Maximum number of markets (default: 10)",
    )

    book_parser = subparsers.add_parser("book", help="Show prices for markets")
    book_parser.add_argument("market_ids", nargs="+", help="Market IDs (e.g. 1.23456789)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        usage_panel()
        return 0

    client = create_client()
    if client is None:
        console.print("[red]BF_APP_KEY is not set. See env.py for the .env layout.[/red]")
        return 1

    with client:
        header("🏇 Betfair Market Viewer")
        info("Locale", client.config.locale or "account default")

        if args.command == "event-types":
            console.print(event_types_table(client.list_event_types()))

        elif args.command == "events":
            market_filter = MarketFilter(
                event_type_ids=[args.event_type], market_countries=args.country
            )
            console.print(events_table(client.list_events(market_filter)))

        elif args.command == "catalogue":
            market_filter = MarketFilter(
                event_type_ids=[args.event_type] if args.event_type else [],
                event_ids=[args.event] if args.event else [],
            )
            projections = ProjectionParams(
                market_projection=[
                    MarketProjection.EVENT,
                    MarketProjection.MARKET_START_TIME,
                    MarketProjection.RUNNER_DESCRIPTION,
                ]
            )
            markets = client.list_market_catalogue(
                market_filter, args.max, projections, sort=MarketSort.FIRST_TO_START
            )
            console.print(catalogue_table(markets))

        elif args.command == "book":
            projections = ProjectionParams(
                price_projection=PriceProjection(price_data=[PriceData.EX_BEST_OFFERS])
            )
            for book in client.list_market_book(args.market_ids, projections):
                section(f"Market {book.market_id}")
                console.print(market_book_table(book))

    return 0


if __name__ == "__main__":
    sys.exit(main())
