from typing import Literal

from pydantic import BaseModel, Field

TransportMode = Literal["flight", "train", "bus"]
AccommodationTier = Literal["budget", "standard", "luxury"]


class TripGenerateRequest(BaseModel):
    """Raw trip form; required-field and range checks happen in the planner."""

    destination: str | None = None
    name: str | None = None
    age: int | str | None = None
    people: int | str | None = None
    days: int | str | None = None
    budget: float | str | None = None
    transport: str | None = None
    hotel: str | None = None
    activities: str | None = None


class TripRequest(BaseModel):
    destination: str = Field(min_length=1)
    name: str
    age: int = Field(ge=1, le=120)
    people: int = Field(ge=1, le=50)
    days: int = Field(ge=1)
    budget: float = Field(ge=100)
    transport: TransportMode
    hotel: AccommodationTier = "standard"
    activities: str = ""

    model_config = {"frozen": True}
