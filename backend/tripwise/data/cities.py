"""City reference data for hotel search — coordinates and nightly base prices."""

# City/airport code → (latitude, longitude, display name)
CITY_COORDINATES: dict[str, tuple[float, float, str]] = {
    "NYC": (40.7128, -74.0060, "New York"),
    "LON": (51.5074, -0.1278, "London"),
    "PAR": (48.8566, 2.3522, "Paris"),
    "DXB": (25.2048, 55.2708, "Dubai"),
    "SIN": (1.3521, 103.8198, "Singapore"),
    "DEL": (28.6139, 77.2090, "Delhi"),
    "BOM": (19.0760, 72.8777, "Mumbai"),
    "BLR": (12.9716, 77.5946, "Bangalore"),
    "MAA": (13.0827, 80.2707, "Chennai"),
    "HYD": (17.3850, 78.4867, "Hyderabad"),
    "CCU": (22.5726, 88.3639, "Kolkata"),
    "PNQ": (18.5204, 73.8567, "Pune"),
    "AMD": (23.0225, 72.5714, "Ahmedabad"),
    "GOI": (15.2993, 74.1240, "Goa"),
    "COK": (9.9312, 76.2673, "Kochi"),
    "LAX": (34.0522, -118.2437, "Los Angeles"),
    "JFK": (40.6413, -73.7781, "New York"),
    "LHR": (51.4700, -0.4543, "London"),
    "CDG": (49.0097, 2.5479, "Paris"),
    "FRA": (50.0379, 8.5622, "Frankfurt"),
}

# Unknown codes are searched around New York, keeping the code as the name.
DEFAULT_COORDINATES = (40.7128, -74.0060)

# Nightly base rate in USD
CITY_BASE_PRICES_USD: dict[str, int] = {
    "NYC": 250, "LAX": 200, "SFO": 220, "MIA": 180,
    "LON": 200, "PAR": 180, "FRA": 150, "AMS": 160,
    "DXB": 150, "SIN": 150, "HKG": 180, "NRT": 160,
    "DEL": 60, "BOM": 70, "BLR": 55, "MAA": 50,
    "HYD": 50, "CCU": 45, "PNQ": 50, "AMD": 45,
    "GOI": 80, "COK": 60,
}
DEFAULT_BASE_PRICE_USD = 100


def city_coordinates(code: str) -> tuple[float, float, str]:
    code = code.upper()
    if code in CITY_COORDINATES:
        return CITY_COORDINATES[code]
    lat, lon = DEFAULT_COORDINATES
    return lat, lon, code


def city_base_price(code: str) -> int:
    return CITY_BASE_PRICES_USD.get(code.upper(), DEFAULT_BASE_PRICE_USD)
