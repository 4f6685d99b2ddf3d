"""
Test configuration and fixtures for the aWATTar price client tests.
Contains a fake market-data endpoint and shared sample data.
"""

from datetime import datetime, timedelta
from typing import Callable, List

import httpx
import pytest
import pytz
import structlog

from awattar_prices.services.price_client import PriceClient
from awattar_prices.utils.time_utils import to_epoch_millis

# Midnight UTC on the first day of sample data
T0 = datetime(2023, 11, 14, tzinfo=pytz.utc)
HOUR_MS = 3600 * 1000
DAY_MS = 24 * HOUR_MS


def make_item(start: datetime, price: float, hours: int = 1, unit: str = "Eur/MWh", **extra) -> dict:
    """Build one market-data item the way the API serializes it."""
    start_ms = to_epoch_millis(start)
    item = {
        "start_timestamp": start_ms,
        "end_timestamp": start_ms + hours * HOUR_MS,
        "marketprice": price,
        "unit": unit,
    }
    item.update(extra)
    return item


@pytest.fixture
def market_items() -> List[dict]:
    """
    72 hourly items (three days from T0).

    Prices climb through each day; 03:00 is always the cheapest hour and goes
    negative on the second day.
    """
    items = []
    for hour in range(72):
        price = round(80.0 + (hour % 24) * 1.5, 2)
        if hour % 24 == 3:
            price = -5.25 if hour // 24 == 1 else 12.34
        items.append(make_item(T0 + timedelta(hours=hour), price))
    return items


@pytest.fixture
def fake_api(market_items) -> httpx.MockTransport:
    """
    Transport that behaves like the market-data endpoint.

    Without parameters it returns the first day ("today"); ``start`` alone
    yields 24 hours from ``start``. Slots are selected by start time within
    [start, end). Handled requests are recorded on ``.requests``.
    """
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        params = request.url.params
        start = int(params["start"]) if "start" in params else to_epoch_millis(T0)
        end = int(params["end"]) if "end" in params else start + DAY_MS
        data = [item for item in market_items if start <= item["start_timestamp"] < end]
        return httpx.Response(200, json={"object": "list", "data": data, "url": request.url.path})

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


@pytest.fixture
def client(fake_api) -> PriceClient:
    """PriceClient wired to the fake endpoint."""
    return PriceClient(timeout=5, transport=fake_api)


@pytest.fixture
def client_returning() -> Callable[..., PriceClient]:
    """
    Factory for a PriceClient whose every request gets the same canned response.

    Accepts the keyword arguments of ``httpx.Response`` (``json=``, ``content=``...).
    """
    def factory(status_code: int = 200, **response_kwargs) -> PriceClient:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, **response_kwargs)

        return PriceClient(timeout=5, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration changes from leaking between tests."""
    yield
    structlog.reset_defaults()
