from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Provider(StrEnum):
    amadeus = "amadeus"
    hotelbeds = "hotelbeds"


PROVIDER_DISPLAY_NAMES = {
    Provider.amadeus: "Amadeus",
    Provider.hotelbeds: "Hotel Beds",
}


class UrgencyLevel(StrEnum):
    high = "high"
    medium = "medium"
    low = "low"


class HotelLocation(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0
    address: str | None = None


class HotelPricing(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: float = Field(alias="from", ge=0)
    to: float = Field(ge=0)
    currency: str = "EUR"
    perNight: bool = True


class PetPolicy(BaseModel):
    allowed: bool = False
    fee: float = Field(default=0.0, ge=0)
    restrictions: list[str] = []
    maxPets: int = Field(default=0, ge=0)


class HotelAvailability(BaseModel):
    roomsLeft: int = Field(default=0, ge=0)
    urgencyLevel: UrgencyLevel = UrgencyLevel.medium


class UnifiedHotelRecord(BaseModel):
    id: str
    hotelId: str
    provider: Provider
    name: str
    category: str
    destination: str
    location: HotelLocation
    pricing: HotelPricing
    petPolicy: PetPolicy
    rating: float = Field(ge=0, le=5)
    amenities: list[str] = []
    images: list[str] = []
    availability: HotelAvailability
    lastUpdated: datetime
