"""Currency conversion — live exchange rates with a static fallback table."""

import logging

import httpx

from tripwise.config import settings
from tripwise.data.currency import convert_with_fallback

logger = logging.getLogger(__name__)


class CurrencyClient:
    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.currency_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=settings.currency_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        """Convert ``amount``; never raises for provider failures."""
        if from_currency == to_currency:
            return amount

        client = await self._get_client()
        try:
            resp = await client.get(f"/latest/{from_currency}")
            resp.raise_for_status()
            data = resp.json()
            rates = data.get("rates") if isinstance(data, dict) else None
            rate = rates.get(to_currency) if isinstance(rates, dict) else None
            if rate:
                return amount * float(rate)
            logger.warning(f"No live rate for {from_currency}->{to_currency}, using fallback")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Currency lookup failed ({from_currency}->{to_currency}): {e!r}")

        return convert_with_fallback(amount, from_currency, to_currency)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


currency_client = CurrencyClient()
