"""
Data models package for the aWATTar price client.
Contains the zone enum, wire models and price slot value types.
"""

from .price import MarketDataItem, MarketDataResponse, PriceData, PriceSlot, Zone

__all__ = [
    "MarketDataItem",
    "MarketDataResponse",
    "PriceData",
    "PriceSlot",
    "Zone",
]
