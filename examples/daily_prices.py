#!/usr/bin/env python3
"""
Print today's German market-day prices in Euro per kWh.
"""

import asyncio

from awattar_prices import Zone, price_client
from awattar_prices.utils.time_utils import market_today


async def main():
    zone = Zone.GERMANY
    day = market_today(zone.timezone)
    prices = await price_client.query_date(zone, day, market_time=True)

    print(f"Prices for {day.isoformat()} ({zone.timezone.zone}):")
    for slot in prices:
        print(f"{slot.start} - {slot.end}: {slot.price_per_kwh:.4f} €/kWh")


if __name__ == "__main__":
    asyncio.run(main())
