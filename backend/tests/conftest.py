"""Shared fixtures: in-memory stand-ins for the provider gateways."""

from datetime import datetime, timezone

import pytest

from tripwise.errors import ProviderUnavailable
from tripwise.schemas.trip import TripRequest

FIXED_NOW = datetime(2024, 11, 12, 9, 30, tzinfo=timezone.utc)


class FakeLLM:
    def __init__(self, responses=None, error=None, configured=True):
        self.responses = list(responses or [])
        self.error = error
        self.is_configured = configured
        self.model_name = "fake-model"
        self.calls = []

    async def complete_with(self, preset, system, user):
        self.calls.append({"preset": preset, "system": system, "user": user})
        if self.error:
            raise self.error
        return self.responses.pop(0)


class FakeNews:
    def __init__(self, articles=None):
        self.articles = articles
        self.queries = []

    async def search_recent(self, destination, today=None):
        self.queries.append(destination)
        return self.articles


class FakeAmadeus:
    def __init__(
        self,
        configured=True,
        flights=None,
        flight_error=None,
        hotel_list=None,
        list_error=None,
        hotel_offers=None,
        offers_error=None,
    ):
        self.is_configured = configured
        self.flights = flights or []
        self.flight_error = flight_error
        self.hotel_list = hotel_list or []
        self.list_error = list_error
        self.hotel_offers = hotel_offers or []
        self.offers_error = offers_error
        self.offer_requests = []

    async def search_flight_offers(self, origin, destination, departure_date, adults,
                                   travel_class, currency, return_date=None, max_results=50):
        if self.flight_error:
            raise self.flight_error
        return self.flights

    async def list_hotels_by_geocode(self, latitude, longitude, radius_km=None):
        if self.list_error:
            raise self.list_error
        return self.hotel_list

    async def search_hotel_offers(self, hotel_ids, adults, check_in, check_out, rooms, currency):
        self.offer_requests.append(hotel_ids)
        if self.offers_error:
            raise self.offers_error
        return self.hotel_offers


class FakeCurrency:
    """Converts with fixed rates keyed by (from, to)."""

    def __init__(self, rates=None):
        self.rates = rates or {}
        self.calls = []

    async def convert(self, amount, from_currency, to_currency):
        self.calls.append((from_currency, to_currency))
        if from_currency == to_currency:
            return amount
        return amount * self.rates.get((from_currency, to_currency), 1.0)


def unavailable(provider="Test"):
    return ProviderUnavailable(provider, "timed out")


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def make_trip_request():
    def _make(**overrides):
        data = {
            "destination": "Goa",
            "name": "Asha",
            "age": 30,
            "people": 2,
            "days": 3,
            "budget": 15000,
            "transport": "flight",
        }
        data.update(overrides)
        return TripRequest(**data)

    return _make


@pytest.fixture
def trip_payload():
    return {
        "destination": "Goa",
        "name": "Asha",
        "age": 30,
        "people": 2,
        "days": 3,
        "budget": 15000,
        "transport": "flight",
        "hotel": None,
        "activities": "beaches, seafood",
    }
