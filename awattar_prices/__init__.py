"""
aWATTar Prices - async client for the aWATTar electricity market-data API.

Fetches day-ahead spot prices for a market zone and returns them as
time-bounded price slots.

Main components:
- PriceClient for building requests and parsing responses
- Zone, PriceSlot and PriceData value types
- Domain exceptions for transport, status and decoding failures
"""

__version__ = "0.3.0"

from .exceptions import (
    AwattarException,
    DecodeError,
    HttpStatusError,
    TransportError,
    UnsupportedUnitError,
)
from .models.price import PriceData, PriceSlot, Zone
from .services.price_client import PriceClient, price_client

__all__ = [
    "AwattarException",
    "DecodeError",
    "HttpStatusError",
    "PriceClient",
    "PriceData",
    "PriceSlot",
    "TransportError",
    "UnsupportedUnitError",
    "Zone",
    "price_client",
]
