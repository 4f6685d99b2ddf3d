#!/usr/bin/env python3
"""
Development helper scripts for the aWATTar price client.
Provides manual queries against the live API and a configuration dump.
"""

import asyncio
import sys
from datetime import date, datetime
from pathlib import Path

# Add the repository root to the Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from awattar_prices.config import settings
from awattar_prices.exceptions import AwattarException
from awattar_prices.logging_config import setup_logging
from awattar_prices.models.price import PriceData, Zone
from awattar_prices.services.price_client import price_client


def print_prices(prices: PriceData):
    """Print a slot table followed by the cheapest and most expensive slot."""
    if prices.is_empty():
        print(f"No price slots returned for {prices.zone.name}")
        return

    tz = prices.zone.timezone
    print(f"\nFound {len(prices)} price slots for {prices.zone.name}:")
    print("-" * 72)
    print(f"{'Start':<20} {'End':<20} {'EUR/MWh':>10} {'ct/kWh':>10}")
    print("-" * 72)

    for slot in prices:
        print(f"{slot.start.astimezone(tz).strftime('%Y-%m-%d %H:%M'):<20} "
              f"{slot.end.astimezone(tz).strftime('%Y-%m-%d %H:%M'):<20} "
              f"{slot.price_cents_per_mwh / 100:>10.2f} "
              f"{slot.price_cents_per_kwh:>10.3f}")

    cheapest = prices.min_price()
    priciest = prices.max_price()
    print("-" * 72)
    print(f"Cheapest:  {cheapest.start.astimezone(tz).strftime('%Y-%m-%d %H:%M')} "
          f"({cheapest.price_cents_per_kwh:.3f} ct/kWh)")
    print(f"Priciest:  {priciest.start.astimezone(tz).strftime('%Y-%m-%d %H:%M')} "
          f"({priciest.price_cents_per_kwh:.3f} ct/kWh)")
    print(f"Average:   {prices.average_price_cents_per_mwh() / 1000:.3f} ct/kWh")


async def show_today(zone: Zone):
    """Display the API's default price window."""
    setup_logging()
    print_prices(await price_client.query_today(zone))


async def show_date(zone: Zone, day: date, market_time: bool):
    """Display prices for a single calendar day."""
    setup_logging()
    print_prices(await price_client.query_date(zone, day, market_time=market_time))


async def show_range(zone: Zone, start: datetime, end: datetime):
    """Display prices for an explicit time range."""
    setup_logging()
    print_prices(await price_client.query(zone, start, end))


def show_config():
    """Display current configuration settings."""
    print("Current Configuration:")
    print("-" * 40)
    print(f"Request Timeout: {settings.request_timeout}s")
    print(f"User-Agent: {settings.user_agent}")
    print(f"Log Level: {settings.log_level}")
    print(f"Log Format: {settings.log_format}")
    for zone in Zone:
        print(f"{zone.name.title()} Endpoint: {zone.api_endpoint} ({zone.timezone.zone})")


def usage():
    print("aWATTar Price Client Development Scripts")
    print("Usage: python scripts/dev.py <command> [args]")
    print("\nAvailable commands:")
    print("  show-config                               - Display current configuration")
    print("  today <zone>                              - Show the API's default price window")
    print("  date <zone> <YYYY-MM-DD> [--market-time]  - Show prices for one day")
    print("  range <zone> <start-iso> <end-iso>        - Show prices between two instants")
    print("\nZones: " + ", ".join(zone.value for zone in Zone))


def main(argv=None):
    """Main script entry point with command selection."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        usage()
        return

    command, args = argv[0], argv[1:]

    try:
        if command == "show-config":
            show_config()
        elif command == "today" and len(args) == 1:
            asyncio.run(show_today(Zone.parse(args[0])))
        elif command == "date" and (len(args) == 2 or (len(args) == 3 and args[2] == "--market-time")):
            market_time = len(args) == 3
            asyncio.run(show_date(Zone.parse(args[0]), date.fromisoformat(args[1]), market_time))
        elif command == "range" and len(args) == 3:
            asyncio.run(show_range(
                Zone.parse(args[0]),
                datetime.fromisoformat(args[1]),
                datetime.fromisoformat(args[2]),
            ))
        else:
            print(f"Unknown command or wrong arguments: {' '.join(argv)}")
            print("Run without arguments to see available commands")
            sys.exit(2)
    except ValueError as e:
        print(f"Invalid argument: {e}")
        sys.exit(2)
    except AwattarException as e:
        print(f"Price query failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
