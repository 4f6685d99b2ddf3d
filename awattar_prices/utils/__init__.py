"""
Utility helpers for the aWATTar price client.
"""

from .time_utils import (
    ensure_utc,
    from_epoch_millis,
    market_day_bounds,
    market_today,
    to_epoch_millis,
    utc_day_bounds,
    utc_today,
)

__all__ = [
    "ensure_utc",
    "from_epoch_millis",
    "market_day_bounds",
    "market_today",
    "to_epoch_millis",
    "utc_day_bounds",
    "utc_today",
]
