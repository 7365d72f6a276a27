"""Booking acknowledgements. No reservation or payment is made."""

import logging
import uuid

from tripwise.data.currency import format_price
from tripwise.errors import InputValidationError
from tripwise.services.validation import parse_iso_date, require_fields

logger = logging.getLogger(__name__)


def _reference(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def _require_price(payload: dict, field_name: str) -> float:
    value = payload[field_name]
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise InputValidationError(f"Invalid {field_name}", invalid=[field_name])
    return float(value)


def _acknowledgement(reference: str, message: str) -> dict:
    return {
        "success": True,
        "status": "acknowledged",
        "reference": reference,
        "message": message,
    }


def acknowledge_flight(payload: dict) -> dict:
    require_fields(payload, ("flightId", "price", "currency", "passengerName"))
    price = _require_price(payload, "price")
    currency = str(payload["currency"]).strip().upper()

    reference = _reference("FLT")
    logger.info(f"Flight booking acknowledged: {payload['flightId']} ref={reference}")
    return _acknowledgement(
        reference,
        f"Booking flight {payload['flightId']} for {format_price(price, currency)}. "
        "Payment is completed with the airline.",
    )


def acknowledge_hotel(payload: dict) -> dict:
    require_fields(
        payload,
        ("hotelId", "hotelName", "totalPrice", "currency", "guestName", "checkInDate", "checkOutDate"),
    )
    price = _require_price(payload, "totalPrice")
    check_in = parse_iso_date(payload["checkInDate"], "checkInDate")
    check_out = parse_iso_date(payload["checkOutDate"], "checkOutDate")
    if check_out <= check_in:
        raise InputValidationError(
            "Check-out date must be after check-in date", invalid=["checkOutDate"]
        )
    currency = str(payload["currency"]).strip().upper()

    reference = _reference("HTL")
    logger.info(f"Hotel booking acknowledged: {payload['hotelId']} ref={reference}")
    return _acknowledgement(
        reference,
        f"Booking {payload['hotelName']} ({check_in.isoformat()} to {check_out.isoformat()}) "
        f"for {format_price(price, currency)}. Payment is completed with the hotel.",
    )
