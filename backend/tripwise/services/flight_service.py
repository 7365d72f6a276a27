"""Flight search — Amadeus offers, normalized and priced in the requested currency."""

import asyncio
import logging

from tripwise.data.airlines import airline_name
from tripwise.data.currency import round_price
from tripwise.errors import CredentialMissingError, InputValidationError, ProviderUnavailable
from tripwise.services.amadeus_client import AmadeusClient, amadeus_client
from tripwise.services.currency_client import CurrencyClient, currency_client
from tripwise.services.fallback_synthesizer import format_duration, synthesize_flight_offers
from tripwise.services.validation import extract_int, parse_iso_date, require_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("origin", "destination", "departureDate", "adults", "currency")
TRAVEL_CLASSES = ("ECONOMY", "PREMIUM_ECONOMY", "BUSINESS", "FIRST")
NO_FLIGHTS_MESSAGE = "No flights found. Try different dates or routes."


def parse_duration(duration_str: str) -> int:
    """Parse ISO 8601 duration (PT2H30M) to minutes."""
    if not duration_str or not duration_str.startswith("PT"):
        return 0
    duration_str = duration_str[2:]
    hours = 0
    minutes = 0
    if "H" in duration_str:
        h_part, duration_str = duration_str.split("H")
        hours = int(h_part)
    if "M" in duration_str:
        m_part = duration_str.replace("M", "")
        if m_part:
            minutes = int(m_part)
    return hours * 60 + minutes


def _offer_record(offer: dict) -> dict:
    """Map one Amadeus flight offer onto a FlightOffer record."""
    itineraries = offer.get("itineraries") or [{}]
    itin = itineraries[0]
    segments = itin.get("segments") or []
    if not segments:
        return {}

    first_seg = segments[0]
    last_seg = segments[-1]
    price = offer.get("price") or {}

    cabin = "ECONOMY"
    traveler_pricings = offer.get("travelerPricings") or []
    if traveler_pricings:
        fare_details = traveler_pricings[0].get("fareDetailsBySegment") or []
        if fare_details:
            cabin = fare_details[0].get("cabin", "ECONOMY")

    carrier = first_seg.get("carrierCode", "")
    return {
        "id": str(offer.get("id", "")),
        "price": float(price.get("grandTotal") or price.get("total") or 0),
        "currency": price.get("currency", "USD"),
        "airline": airline_name(carrier),
        "carrierCode": carrier,
        "flightNumber": first_seg.get("number", ""),
        "departureAirport": first_seg["departure"]["iataCode"],
        "departureTime": first_seg["departure"]["at"],
        "arrivalAirport": last_seg["arrival"]["iataCode"],
        "arrivalTime": last_seg["arrival"]["at"],
        "duration": format_duration(parse_duration(itin.get("duration", ""))),
        "stops": len(segments) - 1,
        "cabin": cabin,
        "aircraft": (first_seg.get("aircraft") or {}).get("code", "N/A"),
        "travelers": len(traveler_pricings) or 1,
        "estimated": False,
    }


def parse_offer(offer: dict) -> dict:
    """Parse an Amadeus flight offer into a FlightOffer record; {} when unusable."""
    try:
        return _offer_record(offer)
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Skipping malformed flight offer: {e!r}")
        return {}


class FlightService:
    def __init__(
        self,
        amadeus: AmadeusClient | None = None,
        currency: CurrencyClient | None = None,
    ):
        self.amadeus = amadeus or amadeus_client
        self.currency = currency or currency_client

    async def search(self, payload: dict) -> dict:
        require_fields(payload, REQUIRED_FIELDS)

        origin = str(payload["origin"]).strip().upper()
        destination = str(payload["destination"]).strip().upper()
        if len(origin) != 3 or len(destination) != 3:
            raise InputValidationError(
                "Invalid airport codes. Use 3-letter IATA codes",
                invalid=[f for f, c in (("origin", origin), ("destination", destination)) if len(c) != 3],
            )

        departure_date = parse_iso_date(payload["departureDate"], "departureDate")
        return_date = None
        if payload.get("returnDate"):
            return_date = parse_iso_date(payload["returnDate"], "returnDate")
            if return_date < departure_date:
                raise InputValidationError(
                    "Return date must not be before departure date", invalid=["returnDate"]
                )

        adults = extract_int(payload["adults"])
        if not adults or adults < 1:
            raise InputValidationError("Invalid number of adults", invalid=["adults"])

        travel_class = str(payload.get("travelClass") or "ECONOMY").strip().upper()
        if travel_class not in TRAVEL_CLASSES:
            raise InputValidationError(f"Invalid travel class: {travel_class}", invalid=["travelClass"])

        currency = str(payload["currency"]).strip().upper()

        if not self.amadeus.is_configured:
            raise CredentialMissingError("Amadeus")

        logger.info(f"Searching flights: {origin} -> {destination} on {departure_date}")
        try:
            raw = await self.amadeus.search_flight_offers(
                origin, destination, departure_date, adults, travel_class, currency,
                return_date=return_date,
            )
            flights = [f for f in (parse_offer(o) for o in raw) if f]
        except ProviderUnavailable as e:
            logger.warning(f"Flight search unavailable, using estimated offers: {e}")
            flights = synthesize_flight_offers(
                origin, destination, departure_date, adults, travel_class
            )

        if not flights:
            return {"success": False, "flights": [], "message": NO_FLIGHTS_MESSAGE}

        flights = await asyncio.gather(*(self._price_in(f, currency) for f in flights))
        return {"success": True, "flights": list(flights), "count": len(flights)}

    async def _price_in(self, flight: dict, currency: str) -> dict:
        if flight["currency"] == currency:
            return flight
        converted = await self.currency.convert(flight["price"], flight["currency"], currency)
        return {**flight, "price": round_price(converted), "currency": currency}


flight_service = FlightService()
