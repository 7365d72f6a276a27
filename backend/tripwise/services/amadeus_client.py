"""Amadeus API client — flight offers and two-step hotel search with OAuth2."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date, datetime, timedelta, timezone

import httpx

from tripwise.config import settings
from tripwise.errors import ProviderUnavailable

logger = logging.getLogger(__name__)

PROVIDER = "Amadeus"

TOKEN_PATH = "/v1/security/oauth2/token"
FLIGHT_OFFERS_PATH = "/v2/shopping/flight-offers"
HOTELS_BY_GEOCODE_PATH = "/v1/reference-data/locations/hotels/by-geocode"
HOTEL_OFFERS_PATH = "/v3/shopping/hotel-offers"

TokenFetcher = Callable[[], Awaitable[tuple[str, int]]]


class BearerTokenCache:
    """Holds one bearer token and refreshes it when absent or near expiry.

    Refresh runs under a lock, so concurrent callers share a single fetch.
    """

    def __init__(self, margin_seconds: int | None = None):
        self.margin_seconds = (
            settings.amadeus_token_margin_seconds if margin_seconds is None else margin_seconds
        )
        self._token: str | None = None
        self._expires_at: datetime | None = None
        self._lock = asyncio.Lock()

    def _is_fresh(self) -> bool:
        return (
            self._token is not None
            and self._expires_at is not None
            and datetime.now(timezone.utc) < self._expires_at
        )

    async def get(self, fetch: TokenFetcher) -> str:
        async with self._lock:
            if self._is_fresh():
                return self._token
            token, expires_in = await fetch()
            self._token = token
            self._expires_at = datetime.now(timezone.utc) + timedelta(
                seconds=expires_in - self.margin_seconds
            )
            logger.info("Amadeus token refreshed")
            return token

    def invalidate(self):
        self._token = None
        self._expires_at = None


class AmadeusClient:
    """Adapter for Amadeus Self-Service API."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        token_cache: BearerTokenCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client_id = settings.amadeus_client_id if client_id is None else client_id
        self.client_secret = (
            settings.amadeus_client_secret if client_secret is None else client_secret
        )
        self.base_url = base_url or settings.amadeus_base_url
        self.token_cache = token_cache or BearerTokenCache()
        self._transport = transport
        self._semaphore = asyncio.Semaphore(10)  # 10 req/s rate limit
        self._client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=settings.amadeus_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def _fetch_token(self) -> tuple[str, int]:
        client = await self._get_client()
        try:
            resp = await client.post(
                TOKEN_PATH,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=settings.amadeus_token_timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
            return data["access_token"], int(data.get("expires_in", 1799))
        except httpx.HTTPStatusError as e:
            logger.error(f"Amadeus authentication failed: {e.response.status_code}")
            raise ProviderUnavailable(
                PROVIDER, f"authentication failed: {e.response.status_code}"
            ) from e
        except (httpx.RequestError, KeyError, ValueError) as e:
            logger.error(f"Amadeus token request error: {e}")
            raise ProviderUnavailable(PROVIDER, f"authentication failed: {e}") from e

    async def _authorized_get(self, path: str, params: dict) -> dict:
        """GET with the cached token; a 401 refreshes the token and retries once."""
        client = await self._get_client()
        async with self._semaphore:
            token = await self.token_cache.get(self._fetch_token)
            try:
                resp = await client.get(
                    path, params=params, headers=_auth_headers(token)
                )
                if resp.status_code == 401:
                    logger.warning("Amadeus rejected token, refreshing")
                    self.token_cache.invalidate()
                    token = await self.token_cache.get(self._fetch_token)
                    resp = await client.get(
                        path, params=params, headers=_auth_headers(token)
                    )
                resp.raise_for_status()
                data = resp.json()
                if not isinstance(data, dict):
                    raise ProviderUnavailable(PROVIDER, "unexpected response shape")
                return data
            except httpx.HTTPStatusError as e:
                detail = _error_detail(e.response)
                logger.error(f"Amadeus {path} error: {e.response.status_code} {detail}")
                raise ProviderUnavailable(PROVIDER, detail) from e
            except httpx.RequestError as e:
                logger.error(f"Amadeus request error: {e!r}")
                raise ProviderUnavailable(PROVIDER, str(e) or type(e).__name__) from e
            except ValueError as e:
                raise ProviderUnavailable(PROVIDER, "invalid JSON response") from e

    async def search_flight_offers(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        adults: int,
        travel_class: str,
        currency: str,
        return_date: date | None = None,
        max_results: int = 50,
    ) -> list[dict]:
        """Raw flight offers for a route and date."""
        params = {
            "originLocationCode": origin,
            "destinationLocationCode": destination,
            "departureDate": departure_date.isoformat(),
            "adults": adults,
            "travelClass": travel_class,
            "currencyCode": currency,
            "max": max_results,
            "nonStop": "false",
        }
        if return_date:
            params["returnDate"] = return_date.isoformat()

        data = await self._authorized_get(FLIGHT_OFFERS_PATH, params)
        return data.get("data") or []

    async def list_hotels_by_geocode(
        self, latitude: float, longitude: float, radius_km: int | None = None
    ) -> list[dict]:
        """Hotels around a point; step one of hotel search."""
        data = await self._authorized_get(
            HOTELS_BY_GEOCODE_PATH,
            {
                "latitude": latitude,
                "longitude": longitude,
                "radius": radius_km or settings.hotel_search_radius_km,
                "radiusUnit": "KM",
                "hotelSource": "ALL",
            },
        )
        return data.get("data") or []

    async def search_hotel_offers(
        self,
        hotel_ids: list[str],
        adults: int,
        check_in: date,
        check_out: date,
        rooms: int,
        currency: str,
    ) -> list[dict]:
        """Best priced offer per hotel for a batch of hotel ids."""
        batch = hotel_ids[: settings.hotel_offer_batch_size]
        data = await self._authorized_get(
            HOTEL_OFFERS_PATH,
            {
                "hotelIds": ",".join(batch),
                "adults": adults,
                "checkInDate": check_in.isoformat(),
                "checkOutDate": check_out.isoformat(),
                "roomQuantity": rooms,
                "currency": currency,
                "bestRateOnly": "true",
            },
        )
        return data.get("data") or []

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}", "Accept": "application/json"}


def _error_detail(response: httpx.Response) -> str:
    try:
        errors = response.json().get("errors") or []
        if errors and errors[0].get("detail"):
            return errors[0]["detail"]
    except (ValueError, AttributeError):
        pass
    return f"HTTP {response.status_code}"


amadeus_client = AmadeusClient()
