"""
Services package for the aWATTar price client.
Contains the price client used to query market data.
"""

from .price_client import price_client, PriceClient

__all__ = [
    "price_client",
    "PriceClient",
]
