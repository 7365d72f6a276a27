"""Hotel search service — two-step Amadeus search with estimated pricing fallbacks."""

import asyncio
import logging
import random
from datetime import date

from tripwise.config import settings
from tripwise.data.cities import city_coordinates
from tripwise.data.currency import round_price
from tripwise.errors import CredentialMissingError, InputValidationError, ProviderUnavailable
from tripwise.services.amadeus_client import AmadeusClient, amadeus_client
from tripwise.services.currency_client import CurrencyClient, currency_client
from tripwise.services.fallback_synthesizer import estimate_hotels_from_list, synthesize_hotels
from tripwise.services.validation import extract_int, parse_iso_date, require_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("cityCode", "checkInDate", "checkOutDate", "adults", "currency")
NO_HOTELS_MESSAGE = "No hotels found. Try a different city."
DEFAULT_AMENITIES = ("WiFi", "Parking", "Restaurant")


def _format_address(address: dict | None) -> str:
    if not address:
        return "Address available"
    lines = ", ".join(address.get("lines") or [])
    return f"{lines}, {address.get('cityName') or ''}"


def _hotel_record(offer: dict) -> dict:
    """Map one Amadeus hotel offer onto a HotelOffer record; {} when it has no rate."""
    hotel = offer.get("hotel") or {}
    rates = offer.get("offers") or []
    if not rates:
        return {}
    best = rates[0]
    price = best.get("price") or {}

    check_in = date.fromisoformat(best["checkInDate"])
    check_out = date.fromisoformat(best["checkOutDate"])
    nights = max(1, (check_out - check_in).days)
    total = float(price.get("total") or 0)
    name = hotel.get("name") or "Hotel"
    distance = hotel.get("hotelDistance") or {}

    return {
        "hotelId": hotel.get("hotelId"),
        "name": name,
        "rating": int(float(hotel.get("rating") or 4)),
        "address": _format_address(hotel.get("address")),
        "cityName": (hotel.get("address") or {}).get("cityName"),
        "pricePerNight": total / nights,
        "totalPrice": total,
        "currency": price.get("currency", "USD"),
        "amenities": hotel.get("amenities") or list(DEFAULT_AMENITIES),
        "description": ((best.get("room") or {}).get("description") or {}).get("text")
        or f"{name} - Premium accommodation with excellent facilities",
        "nights": nights,
        "distance": (
            f"{distance['value']} {distance.get('unit', 'KM')} from center"
            if distance.get("value") else ""
        ),
        "estimated": False,
    }


def parse_hotel_offer(offer: dict) -> dict:
    """Parse an Amadeus hotel offer into a HotelOffer record; {} when unusable."""
    try:
        return _hotel_record(offer)
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Skipping malformed hotel offer: {e!r}")
        return {}


class HotelService:
    """Hotel search: geocode listing, then batch offer pricing, then conversion."""

    def __init__(
        self,
        amadeus: AmadeusClient | None = None,
        currency: CurrencyClient | None = None,
        rng: random.Random | None = None,
    ):
        self.amadeus = amadeus or amadeus_client
        self.currency = currency or currency_client
        self.rng = rng or random.Random()

    async def search(self, payload: dict) -> dict:
        require_fields(payload, REQUIRED_FIELDS)

        city_code = str(payload["cityCode"]).strip().upper()
        check_in = parse_iso_date(payload["checkInDate"], "checkInDate")
        check_out = parse_iso_date(payload["checkOutDate"], "checkOutDate")
        if check_out <= check_in:
            raise InputValidationError(
                "Check-out date must be after check-in date", invalid=["checkOutDate"]
            )

        adults = extract_int(payload["adults"])
        if not adults or adults < 1:
            raise InputValidationError("Invalid number of adults", invalid=["adults"])
        rooms = extract_int(payload.get("rooms") or 1) or 1
        currency = str(payload["currency"]).strip().upper()

        if not self.amadeus.is_configured:
            raise CredentialMissingError("Amadeus")

        hotels = await self._find_hotels(city_code, check_in, check_out, adults, rooms, currency)
        if not hotels:
            return {"success": False, "hotels": [], "message": NO_HOTELS_MESSAGE}

        hotels = await asyncio.gather(*(self._price_in(h, currency) for h in hotels))
        return {"success": True, "hotels": list(hotels), "count": len(hotels)}

    async def _find_hotels(
        self,
        city_code: str,
        check_in: date,
        check_out: date,
        adults: int,
        rooms: int,
        currency: str,
    ) -> list[dict]:
        lat, lon, city_name = city_coordinates(city_code)
        logger.info(f"Searching hotels in {city_name} ({city_code})")

        try:
            listing = await self.amadeus.list_hotels_by_geocode(lat, lon)
        except ProviderUnavailable as e:
            logger.warning(f"Hotel list unavailable, synthesizing hotels for {city_code}: {e}")
            return synthesize_hotels(city_code, check_in, check_out)

        if not listing:
            logger.info(f"No hotels listed around {city_name}")
            return []

        logger.info(f"Found {len(listing)} hotels in the area")
        hotel_ids = [h["hotelId"] for h in listing if h.get("hotelId")]
        try:
            offers = await self.amadeus.search_hotel_offers(
                hotel_ids, adults, check_in, check_out, rooms, currency
            )
        except ProviderUnavailable as e:
            logger.warning(f"Hotel offers unavailable, estimating prices: {e}")
            offers = []

        priced = [h for h in (parse_hotel_offer(o) for o in offers) if h]
        if priced:
            logger.info(f"Found {len(priced)} hotels with pricing")
            return priced

        logger.info("Using hotel list with estimated pricing")
        return estimate_hotels_from_list(
            listing, city_code, check_in, check_out, self.rng,
            limit=settings.hotel_list_fallback_size,
        )

    async def _price_in(self, hotel: dict, currency: str) -> dict:
        per_night, total = await asyncio.gather(
            self.currency.convert(hotel["pricePerNight"], hotel["currency"], currency),
            self.currency.convert(hotel["totalPrice"], hotel["currency"], currency),
        )
        return {
            **hotel,
            "pricePerNight": round_price(per_night),
            "totalPrice": round_price(total),
            "currency": currency,
        }


hotel_service = HotelService()
