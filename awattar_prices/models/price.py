"""
Pydantic data models for aWATTar market data and price slots.
Defines the wire format of the API response and the value types handed to callers.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated, Iterator, List, Optional, Tuple, Union

import pytz
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

from awattar_prices.exceptions import UnsupportedUnitError
from awattar_prices.utils.time_utils import ensure_utc, from_epoch_millis

SUPPORTED_UNIT = "Eur/MWh"
CENTS_PER_EURO = 100
KWH_PER_MWH = 1000


class Zone(str, Enum):
    """
    Pricing zone served by aWATTar.

    Germany might split its price zone some day, and aWATTar may add further
    countries; each zone is a single row in ``_ZONE_TABLE``.
    """
    GERMANY = "DE"
    AUSTRIA = "AT"

    @property
    def api_endpoint(self) -> str:
        """Market-data endpoint for this zone."""
        return _ZONE_TABLE[self][0]

    @property
    def timezone(self) -> pytz.BaseTzInfo:
        """
        Local timezone of the market.

        All current zones share one timezone, but a country may drop DST or a
        future zone may live elsewhere.
        """
        return pytz.timezone(_ZONE_TABLE[self][1])

    @classmethod
    def parse(cls, text: str) -> "Zone":
        """Look up a zone by code ("de") or name ("germany"), ignoring case."""
        needle = text.strip().upper()
        for zone in cls:
            if needle in (zone.value, zone.name):
                return zone
        raise ValueError(f"Unknown zone {text!r}, expected one of: {', '.join(z.value for z in cls)}")


# zone -> (endpoint, market timezone)
_ZONE_TABLE = {
    Zone.GERMANY: ("https://api.awattar.de/v1/marketdata", "Europe/Berlin"),
    Zone.AUSTRIA: ("https://api.awattar.at/v1/marketdata", "Europe/Vienna"),
}


class MarketDataItem(BaseModel):
    """
    A single time slot as returned by the aWATTar API.

    Example:
        {"start_timestamp": 1428591600000, "end_timestamp": 1428595200000,
         "marketprice": 42.09, "unit": "Eur/MWh"}
    """
    start_timestamp: StrictInt = Field(description="Slot start in epoch milliseconds")
    end_timestamp: StrictInt = Field(description="Slot end (exclusive) in epoch milliseconds")
    marketprice: Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]] = Field(
        description="Price in ``unit``, must be finite"
    )
    unit: StrictStr = Field(description="Price unit, currently always Eur/MWh")

    @field_validator("start_timestamp", "end_timestamp")
    @classmethod
    def _require_representable(cls, value: int) -> int:
        try:
            from_epoch_millis(value)
        except OverflowError:
            raise ValueError(f"timestamp {value} is out of range") from None
        return value


class MarketDataResponse(BaseModel):
    """Top-level JSON object returned by the market-data endpoint."""
    data: List[MarketDataItem] = Field(description="Price slots in chronological order")


class PriceSlot(BaseModel):
    """
    Represents one pricing interval.

    The price is kept as integer Euro-cents per MWh to avoid floating-point
    drift; the ``price_*_per_kwh`` accessors are for display.
    """
    start: datetime = Field(description="Start of the slot (UTC)")
    end: datetime = Field(description="Non-inclusive end of the slot (UTC)")
    price_cents_per_mwh: StrictInt = Field(description="Price in Euro-cents per MWh, may be negative")

    class Config:
        frozen = True

    @field_validator("start", "end")
    @classmethod
    def _require_aware_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            raise ValueError("timestamp must be timezone-aware")
        return ensure_utc(value)

    @model_validator(mode="after")
    def _require_positive_length(self) -> "PriceSlot":
        if self.end <= self.start:
            raise ValueError(f"slot end {self.end.isoformat()} is not after start {self.start.isoformat()}")
        return self

    @classmethod
    def from_item(cls, item: MarketDataItem) -> "PriceSlot":
        """
        Build a slot from an API item.

        Raises:
            UnsupportedUnitError: If the item is not priced in Eur/MWh
            pydantic.ValidationError: If the item's end is not after its start
        """
        if item.unit.lower() != SUPPORTED_UNIT.lower():
            raise UnsupportedUnitError(item.unit)

        cents = (Decimal(str(item.marketprice)) * CENTS_PER_EURO).to_integral_value(rounding=ROUND_HALF_UP)
        return cls(
            start=from_epoch_millis(item.start_timestamp),
            end=from_epoch_millis(item.end_timestamp),
            price_cents_per_mwh=int(cents),
        )

    @property
    def price_cents_per_kwh(self) -> float:
        """Price in Euro-cents per kWh."""
        return self.price_cents_per_mwh / KWH_PER_MWH

    @property
    def price_per_kwh(self) -> float:
        """Price in Euro per kWh."""
        return self.price_cents_per_mwh / (KWH_PER_MWH * CENTS_PER_EURO)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        """True if ``moment`` lies in [start, end). Naive values are taken as UTC."""
        moment = ensure_utc(moment)
        return self.start <= moment < self.end


class PriceData(Sequence):
    """
    Ordered, read-only collection of price slots for one zone.

    Slots are kept in the order the API returned them (chronological); the
    collection never sorts, filters or checks them for gaps.
    """

    def __init__(self, slots: List[PriceSlot], zone: Zone):
        self._slots: Tuple[PriceSlot, ...] = tuple(slots)
        self._zone = zone

    def __getitem__(self, index):
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[PriceSlot]:
        return iter(self._slots)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PriceData):
            return NotImplemented
        return self._zone == other._zone and self._slots == other._slots

    def __repr__(self) -> str:
        return f"PriceData(zone={self._zone.name}, slots={len(self._slots)})"

    @property
    def zone(self) -> Zone:
        return self._zone

    @property
    def slots(self) -> Tuple[PriceSlot, ...]:
        return self._slots

    def is_empty(self) -> bool:
        return not self._slots

    def slot_for_datetime(self, moment: datetime) -> Optional[PriceSlot]:
        """Find the slot covering ``moment``, or None if no slot does."""
        for slot in self._slots:
            if slot.contains(moment):
                return slot
        return None

    def min_price(self) -> Optional[PriceSlot]:
        """Cheapest slot (earliest on ties), or None when empty."""
        if not self._slots:
            return None
        return min(self._slots, key=lambda slot: slot.price_cents_per_mwh)

    def max_price(self) -> Optional[PriceSlot]:
        """Most expensive slot (earliest on ties), or None when empty."""
        if not self._slots:
            return None
        return max(self._slots, key=lambda slot: slot.price_cents_per_mwh)

    def average_price_cents_per_mwh(self) -> Optional[float]:
        if not self._slots:
            return None
        return sum(slot.price_cents_per_mwh for slot in self._slots) / len(self._slots)
