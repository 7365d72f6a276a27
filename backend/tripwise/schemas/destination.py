from pydantic import BaseModel


class CompareDestinationsRequest(BaseModel):
    destinations: list[str] | None = None
    priorities: list[str] | None = None
    budget: float | str | None = None
    duration: int | str | None = None
    month: str | None = None


class SafetyCheckRequest(BaseModel):
    destination: str | None = None
