"""Static airline reference data — carrier names and route carrier pools."""

AIRLINE_NAMES: dict[str, str] = {
    # North America
    "AA": "American Airlines", "DL": "Delta Air Lines", "UA": "United Airlines",
    "AC": "Air Canada", "WS": "WestJet", "B6": "JetBlue Airways",
    "AS": "Alaska Airlines", "WN": "Southwest Airlines",
    # Europe
    "BA": "British Airways", "LH": "Lufthansa", "AF": "Air France",
    "KL": "KLM", "LX": "Swiss", "VS": "Virgin Atlantic", "TK": "Turkish Airlines",
    # Middle East
    "EK": "Emirates", "QR": "Qatar Airways", "EY": "Etihad Airways",
    "WY": "Oman Air", "SV": "Saudia",
    # Asia-Pacific
    "SQ": "Singapore Airlines", "CX": "Cathay Pacific", "NH": "ANA", "JL": "Japan Airlines",
    # India
    "6E": "IndiGo", "AI": "Air India", "SG": "SpiceJet", "UK": "Vistara",
    "G8": "Go Air", "I5": "AirAsia India",
}

# Airports whose routes are served by the domestic Indian carriers
INDIAN_AIRPORTS = {
    "DEL", "BOM", "BLR", "MAA", "HYD", "CCU", "PNQ", "AMD", "GOI", "COK",
}
EUROPEAN_AIRPORTS = {"LON", "LHR", "LGW", "PAR", "CDG", "ORY", "FRA", "AMS", "MUC", "ZRH"}
MIDDLE_EAST_AIRPORTS = {"DXB", "AUH", "DOH"}
ASIA_PACIFIC_AIRPORTS = {"SIN", "HKG", "NRT", "HND"}

ROUTE_CARRIERS: dict[str, list[str]] = {
    "domestic_india": ["6E", "AI", "UK", "SG", "I5"],
    "india_international": ["AI", "EK", "QR", "EY", "SQ", "LH", "BA"],
    "europe": ["BA", "LH", "AF", "KL", "LX", "VS", "TK"],
    "middle_east": ["EK", "QR", "EY", "WY", "SV"],
    "asia_pacific": ["SQ", "CX", "NH", "JL"],
    "default": ["AA", "DL", "UA", "B6", "AS", "WN"],
}


def airline_name(code: str) -> str:
    """Display name for a carrier code; unknown codes are returned as-is."""
    return AIRLINE_NAMES.get(code, code)


def route_carriers(origin: str, destination: str) -> list[str]:
    """Plausible carriers for a route, for estimated offers."""
    endpoints = {origin, destination}
    if endpoints <= INDIAN_AIRPORTS:
        return ROUTE_CARRIERS["domestic_india"]
    if endpoints & INDIAN_AIRPORTS:
        return ROUTE_CARRIERS["india_international"]
    if endpoints & MIDDLE_EAST_AIRPORTS:
        return ROUTE_CARRIERS["middle_east"]
    if endpoints & EUROPEAN_AIRPORTS:
        return ROUTE_CARRIERS["europe"]
    if endpoints & ASIA_PACIFIC_AIRPORTS:
        return ROUTE_CARRIERS["asia_pacific"]
    return ROUTE_CARRIERS["default"]
