from __future__ import annotations

from datetime import date, timedelta
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from app.schemas.hotels import UnifiedHotelRecord

DEFAULT_DESTINATION = "MAD"
CHECK_IN_OFFSET_DAYS = 7
CHECK_OUT_OFFSET_DAYS = 9


def _days_from_now(days: int) -> date:
    return date.today() + timedelta(days=days)


def wire_flag(value) -> bool:
    """Query flags are on only for the literal string "true"."""
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip() == "true"


WireFlag = Annotated[bool, BeforeValidator(wire_flag)]


class SearchParams(BaseModel):
    """Search query as sent on the wire. Blank values fall back to defaults."""

    model_config = ConfigDict(allow_inf_nan=False)

    destination: str = DEFAULT_DESTINATION
    checkIn: date = Field(default_factory=lambda: _days_from_now(CHECK_IN_OFFSET_DAYS))
    checkOut: date = Field(default_factory=lambda: _days_from_now(CHECK_OUT_OFFSET_DAYS))
    adults: int = 2
    children: int = 0
    rooms: int = 1
    petFriendly: WireFlag = False
    maxPrice: float | None = None
    minRating: float | None = None
    hotelIds: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data):
        if isinstance(data, dict):
            return {
                k: v for k, v in data.items()
                if not (v is None or (isinstance(v, str) and not v.strip()))
            }
        return data

    @property
    def has_filters(self) -> bool:
        return self.petFriendly or self.maxPrice is not None or self.minRating is not None

    @property
    def hotel_id_list(self) -> list[str]:
        if not self.hotelIds:
            return []
        return [h.strip() for h in self.hotelIds.split(",") if h.strip()]


class PriceRange(BaseModel):
    min: float = 0.0
    max: float = 0.0


class SearchStats(BaseModel):
    totalHotels: int = 0
    petFriendlyCount: int = 0
    averagePrice: float = 0.0
    providers: dict[str, int] = {}
    priceRange: PriceRange = PriceRange()


class AggregatedResult(BaseModel):
    hotels: list[UnifiedHotelRecord]
    stats: SearchStats
    source: str
    providerStatus: dict[str, str] = {}
