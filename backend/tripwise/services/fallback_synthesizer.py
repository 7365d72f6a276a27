"""Fallback synthesis — complete substitute records built from static tables.

Everything here is a pure function of its arguments. Trip plans are fully
deterministic given the request and ``generated_at``; hotel price estimates
take an injectable ``random.Random`` so callers can pin the jitter.
"""

import copy
import hashlib
import logging
import random
from datetime import date, datetime, timedelta, timezone

from tripwise.data.airlines import INDIAN_AIRPORTS, airline_name, route_carriers
from tripwise.data.cities import city_base_price, city_coordinates
from tripwise.data.content import (
    ACCOMMODATION_AREAS,
    ACCOMMODATION_TIERS,
    ACTIVITY_TEMPLATES,
    ARCHETYPE_TIPS,
    ATTRACTION_TEMPLATES,
    BUDGET_SHARES,
    CITY_ATTRACTIONS,
    CLOSING_TIPS,
    DAILY_BASE_COSTS,
    DEFAULT_ACCOMMODATION_AREA,
    DEFAULT_LOCAL_TRANSPORT,
    GENERAL_TIPS,
    GENERIC_CUISINE,
    GENERIC_MARKETS,
    LOCAL_TRANSPORT,
    REGION_CUISINE,
    REGION_MARKETS,
    SENIOR_TIPS,
    TO_DESTINATION_TRANSPORT,
    TRANSPORT_COSTS,
    TRANSPORT_TIPS,
    YOUTH_TIPS,
)
from tripwise.data.destinations import (
    ARCHETYPE_DESCRIPTIONS,
    ARCHETYPE_PATTERNS,
    DEFAULT_EMERGENCY_CONTACTS,
    DEFAULT_PROFILE,
    DESTINATION_PROFILES,
    EMERGENCY_CONTACTS,
    HOME_COUNTRY,
    TIME_ZONES,
    UNKNOWN_TIME_ZONE,
)
from tripwise.schemas.trip import TripRequest

logger = logging.getLogger(__name__)

FIRST_DAY_THEME = "Arrival and First Impressions"
LAST_DAY_THEME = "Final Exploration and Departure"

BUDGET_COMPONENTS = ("accommodation", "food", "activities", "transport", "shopping")


# ─── Destination profile ───


def detect_archetype(name: str) -> str:
    """First archetype whose keyword appears in the name, else "general"."""
    key = name.lower().strip()
    for archetype, keywords in ARCHETYPE_PATTERNS.items():
        if any(kw in key for kw in keywords):
            return archetype
    return "general"


def resolve_destination_profile(name: str) -> dict:
    """Curated lookup, then keyword patterns, then a generic profile."""
    key = name.lower().strip()
    curated = DESTINATION_PROFILES.get(key)
    if curated:
        return {
            "name": name,
            **curated,
            "timeZone": TIME_ZONES.get(curated["country"], UNKNOWN_TIME_ZONE),
        }

    archetype = detect_archetype(key)
    return {
        "name": name,
        "country": DEFAULT_PROFILE["country"],
        "region": DEFAULT_PROFILE["region"],
        "type": archetype,
        "description": ARCHETYPE_DESCRIPTIONS[archetype].replace("{name}", name),
        "bestTime": DEFAULT_PROFILE["bestTime"],
        "currency": DEFAULT_PROFILE["currency"],
        "language": DEFAULT_PROFILE["language"],
        "timeZone": DEFAULT_PROFILE["timeZone"],
    }


def season_info(archetype: str, month: int) -> str:
    if 3 <= month <= 5:
        if archetype == "mountain":
            return "Spring - Pleasant weather, ideal for sightseeing and outdoor activities"
        return (
            "Summer - Hot weather, carry light clothes, stay hydrated, "
            "plan indoor activities during peak hours"
        )
    if 6 <= month <= 9:
        return (
            "Monsoon - Rainy season, carry umbrella and waterproof gear, check weather updates, "
            "some outdoor activities may be restricted"
        )
    if 10 <= month <= 11:
        return (
            "Post-monsoon - Pleasant weather, ideal for travel and all outdoor activities, "
            "perfect time for sightseeing"
        )
    return (
        "Winter - Cool to cold weather, carry warm clothes especially for evenings, "
        "great weather for exploring"
    )


# ─── Content sections ───


def _fill_name(entries: list[dict], name: str) -> list[dict]:
    filled = []
    for entry in entries:
        item = copy.deepcopy(entry)
        for field, value in item.items():
            if isinstance(value, str):
                item[field] = value.replace("{name}", name)
        filled.append(item)
    return filled


def synthesize_attractions(name: str, archetype: str) -> list[dict]:
    specific = CITY_ATTRACTIONS.get(name.lower().strip())
    if specific:
        return copy.deepcopy(specific)
    templates = ATTRACTION_TEMPLATES.get(archetype, ATTRACTION_TEMPLATES["metropolitan"])
    return _fill_name(templates, name)


def synthesize_activities(archetype: str, age: int) -> list[dict]:
    templates = ACTIVITY_TEMPLATES.get(archetype, ACTIVITY_TEMPLATES["metropolitan"])
    activities = []
    for template in templates:
        item = {k: v for k, v in template.items() if k != "maxAge"}
        max_age = template["maxAge"]
        item["ageAppropriate"] = max_age is None or age < max_age
        activities.append(item)
    return activities


def synthesize_cuisine(name: str, region: str) -> list[dict]:
    if region in REGION_CUISINE:
        return copy.deepcopy(REGION_CUISINE[region])
    return _fill_name(GENERIC_CUISINE, name)


def synthesize_shopping(name: str, region: str) -> list[dict]:
    if region in REGION_MARKETS:
        return copy.deepcopy(REGION_MARKETS[region])
    return _fill_name(GENERIC_MARKETS, name)


def _restaurants(dish: dict) -> list[str]:
    return [r.strip() for r in dish.get("restaurants", "").split(",") if r.strip()]


def _first_restaurant(dish: dict, default: str) -> str:
    names = _restaurants(dish)
    return names[0] if names else default


def synthesize_itinerary(
    request: TripRequest,
    attractions: list[dict],
    activities: list[dict],
    cuisine: list[dict],
) -> list[dict]:
    """Day-by-day plan; day 1 and the last day carry fixed themes.

    Interior days cycle the content lists by index so any list length works.
    A one-day trip is a single arrival day.
    """
    days = request.days
    hotel = request.hotel
    itinerary = []

    for day in range(1, days + 1):
        if day == 1:
            itinerary.append({
                "day": 1,
                "theme": FIRST_DAY_THEME,
                "morning": (
                    f"Arrive in {request.destination}, check into hotel, "
                    "freshen up and light breakfast"
                ),
                "afternoon": (
                    f"Explore {attractions[0]['name'] if attractions else 'city center'} "
                    f"and have lunch at "
                    f"{_first_restaurant(cuisine[0], 'local restaurant') if cuisine else 'local restaurant'}"
                ),
                "evening": (
                    f"Evening stroll at "
                    f"{attractions[1]['name'] if len(attractions) > 1 else 'main market area'} "
                    "and welcome dinner"
                ),
                "meals": {
                    "breakfast": "Hotel breakfast or local cafe",
                    "lunch": _first_restaurant(cuisine[0], "Traditional local restaurant")
                    if cuisine else "Traditional local restaurant",
                    "dinner": _first_restaurant(cuisine[1], "Popular local eatery")
                    if len(cuisine) > 1 else "Popular local eatery",
                },
                "accommodation": f"Check into {hotel} hotel in city center",
                "transportation": "Airport/station to hotel by taxi or pre-booked cab",
                "tips": "Rest well after travel, stay hydrated, get local SIM card, keep hotel address handy",
                "estimatedCost": "₹1500-3000",
            })
        elif day == days:
            final_stop = (
                attractions[min(day - 1, len(attractions) - 1)]["name"]
                if attractions else "final attraction"
            )
            market = next(
                (a["name"] for a in attractions if a.get("category") == "shopping"),
                "local market",
            )
            itinerary.append({
                "day": days,
                "theme": LAST_DAY_THEME,
                "morning": f"Visit {final_stop}, pack and check out",
                "afternoon": f"Last-minute shopping at {market}, departure preparations",
                "evening": "Safe journey back home",
                "meals": {
                    "breakfast": "Hotel breakfast",
                    "lunch": "Quick meal at food court or airport",
                    "dinner": "Travel meal or home",
                },
                "accommodation": "Check out from hotel",
                "transportation": "Hotel to departure point by taxi",
                "tips": "Keep important documents ready, arrive early at station/airport, pack souvenirs carefully",
                "estimatedCost": "₹800-1500",
            })
        else:
            itinerary.append(
                _interior_day(day, hotel, attractions, activities, cuisine)
            )

    return itinerary


def _interior_day(
    day: int,
    hotel: str,
    attractions: list[dict],
    activities: list[dict],
    cuisine: list[dict],
) -> dict:
    activity = activities[(day - 2) % len(activities)] if activities else {}
    attraction_index = (day - 1) % len(attractions) if attractions else 0
    attraction = attractions[attraction_index] if attractions else {}

    if day % 2 == 0:
        sunset = (
            attractions[(attraction_index + 1) % len(attractions)]["name"]
            if attractions else "scenic spot"
        )
        evening = f"Sunset at {sunset}"
    else:
        evening = "Leisure time and local market exploration"

    breakfast = {1: "Hotel restaurant", 2: "Local breakfast joint"}.get(day % 3, "Cafe hopping")

    lunch = "Traditional restaurant"
    dinner = "Popular dinner spot"
    if cuisine:
        cuisine_index = (day - 1) % len(cuisine)
        rotation = (day - 2) // len(cuisine)
        lunch_options = _restaurants(cuisine[cuisine_index])
        if lunch_options:
            lunch = lunch_options[rotation % len(lunch_options)]
        dinner = _first_restaurant(cuisine[(cuisine_index + 1) % len(cuisine)], dinner)

    return {
        "day": day,
        "theme": f"Cultural Immersion Day {day - 1}",
        "morning": (
            f"Start with {activity.get('name', 'morning activity')} "
            f"at {activity.get('location', 'city area')}"
        ),
        "afternoon": (
            f"Visit {attraction.get('name', 'major attraction')} "
            f"and explore {attraction.get('location', 'surrounding area')}"
        ),
        "evening": evening,
        "meals": {"breakfast": breakfast, "lunch": lunch, "dinner": dinner},
        "accommodation": f"Continue stay at {hotel} hotel",
        "transportation": "Local transport - auto, taxi, or walking depending on distance",
        "tips": "Start early to avoid crowds, wear comfortable shoes, carry water and snacks, respect local customs",
        "estimatedCost": "₹2000-4500",
    }


# ─── Budget ───


def synthesize_budget(days: int, people: int, hotel: str, transport: str, archetype: str) -> dict:
    """Cost estimate whose five components sum exactly to ``total``."""
    tiers = DAILY_BASE_COSTS.get(archetype, DAILY_BASE_COSTS["general"])
    daily = tiers.get(hotel, tiers["standard"])
    scale = days * people

    budget = {
        "accommodation": round(daily * BUDGET_SHARES["accommodation"] * scale),
        "food": round(daily * BUDGET_SHARES["food"] * scale),
        "activities": round(daily * BUDGET_SHARES["activities"] * scale),
        "transport": TRANSPORT_COSTS[transport] * people,
        "shopping": round(daily * BUDGET_SHARES["shopping"] * scale),
    }
    budget["total"] = sum(budget[c] for c in BUDGET_COMPONENTS)
    budget["breakdown"] = (
        "Budget allocated as: Accommodation (35%), Food (30%), Activities (25%), "
        f"Transport ({transport}), Shopping (10%)"
    )
    return budget


# ─── Practical info ───


def accommodation_options(archetype: str) -> dict:
    return {
        **ACCOMMODATION_TIERS,
        "areas": ACCOMMODATION_AREAS.get(archetype, DEFAULT_ACCOMMODATION_AREA),
    }


def transport_options(archetype: str) -> dict:
    return {
        "toDestination": dict(TO_DESTINATION_TRANSPORT),
        "local": LOCAL_TRANSPORT.get(archetype, DEFAULT_LOCAL_TRANSPORT),
    }


def synthesize_tips(profile: dict, transport: str, age: int) -> list[str]:
    tips = [
        f"Best time to visit {profile['region']}: {profile['bestTime']}",
        f"Local currency: {profile['currency']}",
        f"Languages spoken: {profile['language']}",
        *GENERAL_TIPS,
        *TRANSPORT_TIPS.get(transport, ()),
    ]
    if age > 60:
        tips.extend(SENIOR_TIPS)
    elif age < 25:
        tips.extend(YOUTH_TIPS)
    tips.extend(ARCHETYPE_TIPS.get(profile["type"], ()))
    tips.extend(CLOSING_TIPS)
    return tips


def emergency_info(country: str) -> dict:
    contacts = EMERGENCY_CONTACTS.get(country, DEFAULT_EMERGENCY_CONTACTS)
    if country != HOME_COUNTRY:
        embassy = "Contact Indian embassy/consulate for assistance while abroad"
    else:
        embassy = "Not applicable for domestic travel"
    return {
        "contacts": dict(contacts),
        "hospitals": "Locate nearest hospitals through hotel concierge, Google Maps, or local directories",
        "embassy": embassy,
        "precautions": (
            "Keep emergency contacts saved in phone, inform family about travel plans, "
            "carry travel insurance documents"
        ),
    }


def synthesize_trip_plan(request: TripRequest, generated_at: datetime | None = None) -> dict:
    """Complete offline trip plan for a validated request."""
    generated_at = generated_at or datetime.now(timezone.utc)
    profile = resolve_destination_profile(request.destination)
    archetype = profile["type"]

    attractions = synthesize_attractions(request.destination, archetype)
    activities = synthesize_activities(archetype, request.age)
    cuisine = synthesize_cuisine(request.destination, profile["region"])

    destination = {
        "name": profile["name"],
        "country": profile["country"],
        "region": profile["region"],
        "type": archetype,
        "description": profile["description"],
        "bestTime": profile["bestTime"],
        "climate": season_info(archetype, generated_at.month),
        "currency": profile["currency"],
        "language": profile["language"],
        "timeZone": profile["timeZone"],
    }

    return {
        "destination": destination,
        "attractions": attractions,
        "activities": activities,
        "cuisine": cuisine,
        "dailyItinerary": synthesize_itinerary(request, attractions, activities, cuisine),
        "budget": synthesize_budget(
            request.days, request.people, request.hotel, request.transport, archetype
        ),
        "accommodation": accommodation_options(archetype),
        "transportation": transport_options(archetype),
        "tips": synthesize_tips(profile, request.transport, request.age),
        "shopping": synthesize_shopping(request.destination, profile["region"]),
        "emergency": emergency_info(profile["country"]),
        "metadata": {
            "generatedAt": generated_at.isoformat(),
            "source": "offline",
            "processingTimeMs": 0,
        },
    }


# ─── Destination comparison ───

DEFAULT_MATCH_SCORE = 65

DEFAULT_HIGHLIGHTS = (
    "Cultural landmarks and historical sites",
    "Local cuisine and dining experiences",
    "Natural attractions and scenic views",
    "Shopping and local markets",
)
DEFAULT_CONSIDERATIONS = (
    "Consider visa requirements for entry",
    "Check travel advisories before booking",
    "Book accommodations in advance during peak season",
)


def default_comparison(destination: str) -> dict:
    return {
        "destination": destination,
        "matchScore": DEFAULT_MATCH_SCORE,
        "overview": (
            f"{destination} is a popular travel destination known for its unique blend of "
            "culture, attractions, and experiences suitable for various types of travelers."
        ),
        "climate": "Check local weather forecasts for accurate seasonal information.",
        "budget": (
            "Budget varies based on accommodation choice. Mid-range: $80-150/day. "
            "Luxury: $200+/day. Budget: $40-80/day."
        ),
        "highlights": list(DEFAULT_HIGHLIGHTS),
        "considerations": list(DEFAULT_CONSIDERATIONS),
        "activities": (
            "Mix of sightseeing, local food tours, museum visits, "
            "and outdoor activities based on your interests."
        ),
        "synthesized": True,
    }


def complete_comparison(entry: dict) -> dict:
    """Fill fields missing from a live entry using the default record."""
    defaults = default_comparison(entry["destination"])
    completed = {}
    for field, default in defaults.items():
        if field == "synthesized":
            continue
        value = entry.get(field)
        completed[field] = default if value in (None, "", []) else value
    for field, value in entry.items():
        completed.setdefault(field, value)
    completed["synthesized"] = False
    return completed


def clean_comparisons(entries: list) -> list[dict]:
    """Keep well-formed entries (objects naming a destination), completed."""
    cleaned = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("destination")
        if not isinstance(name, str) or not name.strip():
            continue
        cleaned.append(complete_comparison(entry))
    return cleaned


def backfill_comparisons(entries: list[dict], destinations: list[str]) -> list[dict]:
    """Append a default record for every requested destination missing from ``entries``.

    Matching is case-insensitive; entries for unrequested names are kept.
    """
    present = {e["destination"].strip().lower() for e in entries}
    result = list(entries)
    for destination in destinations:
        if destination.strip().lower() not in present:
            result.append(default_comparison(destination))
            present.add(destination.strip().lower())
    return result


# ─── Hotels ───

HOTEL_BRANDS = (
    "Grand", "Residency", "Comfort Inn", "Plaza", "Heritage Suites",
    "Park View", "City Center Hotel", "Royal Palace Hotel", "Urban Suites", "Lakeside Inn",
)
HOTEL_AMENITIES = ("Free WiFi", "Parking", "Restaurant", "Gym", "Pool")


def _nights(check_in: date, check_out: date) -> int:
    return max(1, (check_out - check_in).days)


def estimate_hotels_from_list(
    hotels: list[dict],
    city_code: str,
    check_in: date,
    check_out: date,
    rng: random.Random,
    limit: int = 15,
) -> list[dict]:
    """Price listed hotels from the city base rate with ±30% jitter, in USD."""
    nights = _nights(check_in, check_out)
    base = city_base_price(city_code)
    _, _, city_name = city_coordinates(city_code)

    estimated = []
    for hotel in hotels[:limit]:
        per_night = base * (0.7 + rng.random() * 0.6)
        address = hotel.get("address") or {}
        distance = hotel.get("distance") or {}
        name = hotel.get("name") or "Hotel"
        estimated.append({
            "hotelId": hotel.get("hotelId"),
            "name": name,
            "rating": rng.randint(4, 5),
            "address": address.get("cityName") or city_name,
            "cityName": address.get("cityName") or city_name,
            "pricePerNight": per_night,
            "totalPrice": per_night * nights,
            "currency": "USD",
            "amenities": list(HOTEL_AMENITIES[: rng.randint(3, 5)]),
            "description": (
                f"{name} offers comfortable accommodations with modern amenities "
                "and excellent service."
            ),
            "nights": nights,
            "distance": f"{round(distance['value'])} km from center" if distance.get("value") else "",
            "estimated": True,
        })
    return estimated


def synthesize_hotels(
    city_code: str,
    check_in: date,
    check_out: date,
    rng: random.Random | None = None,
    count: int = 10,
) -> list[dict]:
    """Fully synthetic hotel results for a city when no listing is available."""
    if rng is None:
        seed_str = f"hotel_{city_code.upper()}_{check_in.isoformat()}_{check_out.isoformat()}"
        rng = random.Random(int(hashlib.md5(seed_str.encode()).hexdigest()[:8], 16))

    _, _, city_name = city_coordinates(city_code)
    listing = [
        {
            "hotelId": f"SYN{city_code.upper()}{i:03d}",
            "name": f"{brand} {city_name}",
            "address": {"cityName": city_name},
            "distance": {"value": round(rng.uniform(0.5, 15.0), 1)},
        }
        for i, brand in enumerate(rng.sample(HOTEL_BRANDS, min(count, len(HOTEL_BRANDS))))
    ]
    return estimate_hotels_from_list(listing, city_code, check_in, check_out, rng, limit=count)


# ─── Flights ───

FLIGHT_FARE_FACTOR = 1.5
CABIN_MULTIPLIERS = {
    "ECONOMY": 1.0, "PREMIUM_ECONOMY": 1.8, "BUSINESS": 3.5, "FIRST": 6.0,
}
AIRCRAFT_CODES = ("320", "321", "738", "789", "77W", "359")


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}h{minutes % 60}m"


def synthesize_flight_offers(
    origin: str,
    destination: str,
    departure_date: date,
    adults: int,
    travel_class: str = "ECONOMY",
) -> list[dict]:
    """Estimated offers in USD, deterministic per route, date and class."""
    seed_str = f"{origin}{destination}{departure_date.isoformat()}{travel_class}"
    rng = random.Random(int(hashlib.md5(seed_str.encode()).hexdigest()[:8], 16))

    fare = (
        (city_base_price(origin) + city_base_price(destination))
        * FLIGHT_FARE_FACTOR
        * CABIN_MULTIPLIERS.get(travel_class, 1.0)
    )
    carriers = route_carriers(origin, destination)
    base_duration = 130 if {origin, destination} <= INDIAN_AIRPORTS else 420

    offers = []
    for i in range(rng.randint(5, 10)):
        carrier = rng.choice(carriers)
        stops = rng.choices([0, 1, 2], weights=[60, 30, 10])[0]
        duration = base_duration + stops * rng.randint(45, 90)
        departure = datetime(
            departure_date.year, departure_date.month, departure_date.day,
            rng.randint(6, 21), rng.choice([0, 15, 30, 45]),
        )
        arrival = departure + timedelta(minutes=duration)
        offers.append({
            "id": f"EST{i + 1}",
            "price": round(fare * rng.uniform(0.8, 1.8) * adults, 2),
            "currency": "USD",
            "airline": airline_name(carrier),
            "carrierCode": carrier,
            "flightNumber": str(rng.randint(100, 9999)),
            "departureAirport": origin,
            "departureTime": departure.isoformat(),
            "arrivalAirport": destination,
            "arrivalTime": arrival.isoformat(),
            "duration": format_duration(duration),
            "stops": stops,
            "cabin": travel_class,
            "aircraft": rng.choice(AIRCRAFT_CODES),
            "travelers": adults,
            "estimated": True,
        })

    logger.info(f"Synthesized {len(offers)} estimated offers for {origin}-{destination}")
    return sorted(offers, key=lambda o: o["price"])
