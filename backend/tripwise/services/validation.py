"""Request validation helpers shared by the orchestrators."""

import re
from datetime import date

from pydantic import BaseModel, ValidationError

from tripwise.errors import InputValidationError

_INTEGER = re.compile(r"-?\d+")


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(payload: dict, fields: tuple[str, ...], message: str = "Missing required fields"):
    """Raise InputValidationError listing every blank required field."""
    missing = [f for f in fields if _is_blank(payload.get(f))]
    if missing:
        raise InputValidationError(message, missing=missing)


def extract_int(value) -> int | None:
    """Leading integer of a value; "5 days" -> 5, "" -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _INTEGER.search(str(value))
    return int(match.group()) if match else None


def parse_iso_date(value, field_name: str) -> date:
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as e:
        raise InputValidationError(
            f"Invalid date for {field_name}, expected YYYY-MM-DD", invalid=[field_name]
        ) from e


def build_model(model: type[BaseModel], data: dict, message: str):
    """Construct a pydantic model, mapping its errors to InputValidationError."""
    try:
        return model(**data)
    except ValidationError as e:
        invalid = []
        for err in e.errors():
            name = str(err["loc"][0]) if err.get("loc") else "request"
            if name not in invalid:
                invalid.append(name)
        raise InputValidationError(message, invalid=invalid) from e
