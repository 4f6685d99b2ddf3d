"""
aWATTar price client - builds market-data requests and parses the responses.
One HTTP GET per query; no caching, retries or shared mutable state.
"""

from datetime import date, datetime
from typing import Any, List, Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from awattar_prices.config import settings
from awattar_prices.exceptions import AwattarException, DecodeError, HttpStatusError, TransportError
from awattar_prices.logging_config import get_logger
from awattar_prices.models.price import MarketDataResponse, PriceData, PriceSlot, Zone
from awattar_prices.utils.time_utils import market_day_bounds, to_epoch_millis, utc_day_bounds

logger = get_logger(__name__)


class PriceClient:
    """Stateless client for the aWATTar market-data API."""

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def query(
        self,
        zone: Zone,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> PriceData:
        """
        Query prices for ``zone`` between ``start`` and ``end``.

        Supplying only ``start`` returns prices from ``start`` up to 24 hours later.
        Supplying both returns all prices in between, within the limits of the API.
        Supplying neither lets the API pick its default window (now up to roughly
        24 hours ahead); ``query_today`` is the shortcut for that.

        ``start <= end`` is not checked here; the API decides what an inverted
        range means.

        Args:
            zone: Market to query
            start: Optional start instant (naive values are taken as UTC)
            end: Optional end instant (naive values are taken as UTC)

        Returns:
            PriceData with slots in API order

        Raises:
            TransportError: The request could not complete
            HttpStatusError: The API returned a non-2xx status
            DecodeError: The body is not JSON or does not match the schema
        """
        try:
            url = self.build_query_url(zone, start, end)
            payload = await self._fetch_json(url)
            slots = self._parse_slots(payload)
        except AwattarException as e:
            logger.error("Price query failed", zone=zone.value, error=str(e), error_type=type(e).__name__)
            raise

        logger.info("Fetched price slots", zone=zone.value, count=len(slots))
        return PriceData(slots, zone)

    async def query_today(self, zone: Zone) -> PriceData:
        """Query the API's default window for ``zone``."""
        return await self.query(zone, None, None)

    async def query_date(self, zone: Zone, day: date, market_time: bool = False) -> PriceData:
        """
        Query prices for one calendar day.

        By default the day runs from 00:00 UTC to 00:00 UTC the next day. With
        ``market_time=True`` it runs from local midnight to local midnight in the
        zone's timezone, which yields 24 hourly slots except on DST switch days.
        """
        if market_time:
            start, end = market_day_bounds(day, zone.timezone)
        else:
            start, end = utc_day_bounds(day)
        return await self.query(zone, start, end)

    def build_query_url(
        self,
        zone: Zone,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> str:
        """Build the market-data URL with epoch-millisecond ``start``/``end`` parameters."""
        params = [
            (name, to_epoch_millis(value))
            for name, value in (("start", start), ("end", end))
            if value is not None
        ]

        url = zone.api_endpoint
        if params:
            url = f"{url}?{urlencode(params)}"

        logger.debug("Built query URL", zone=zone.value, url=url)
        return url

    async def _fetch_json(self, url: str) -> Any:
        """Download and decode the JSON body."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e!r}") from e

        if not response.is_success:
            raise HttpStatusError(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

    def _parse_slots(self, payload: Any) -> List[PriceSlot]:
        """Validate the decoded body and convert every item into a PriceSlot."""
        try:
            response = MarketDataResponse.model_validate(payload)
            return [PriceSlot.from_item(item) for item in response.data]
        except ValidationError as e:
            raise DecodeError(f"Response does not match the market-data schema: {e}") from e


# Global price client instance
price_client = PriceClient()
