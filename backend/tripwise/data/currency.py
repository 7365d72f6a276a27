"""Currency utilities — static fallback rates and price formatting."""

# Used only when the live rate lookup fails; rows are the source currency.
FALLBACK_RATES: dict[str, dict[str, float]] = {
    "USD": {
        "USD": 1.0, "INR": 83.12, "EUR": 0.92, "GBP": 0.79,
        "JPY": 149.50, "AUD": 1.53, "CAD": 1.36, "SGD": 1.35,
    },
    "INR": {
        "USD": 0.012, "INR": 1.0, "EUR": 0.011, "GBP": 0.0095,
        "JPY": 1.8, "AUD": 0.018, "CAD": 0.016, "SGD": 0.016,
    },
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "CAD": "CA$", "GBP": "£", "EUR": "€",
    "JPY": "¥", "AUD": "A$", "SGD": "S$", "HKD": "HK$",
    "INR": "₹", "AED": "AED",
}


def convert_with_fallback(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert using the static table. Unknown pairs return the amount unchanged."""
    if from_currency == to_currency:
        return amount
    rate = FALLBACK_RATES.get(from_currency, {}).get(to_currency)
    if rate is None:
        return amount
    return amount * rate


def round_price(amount: float) -> float:
    return round(amount * 100) / 100


def format_price(amount: float, currency: str = "INR") -> str:
    """Format a price with currency symbol for display."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{round(amount):,}"
