from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.hotels import Provider, UnifiedHotelRecord, UrgencyLevel
from app.schemas.search import SearchParams, SearchStats

ALL_PROVIDERS = [Provider.amadeus.value, Provider.hotelbeds.value]


class SearchMeta(BaseModel):
    searchParams: SearchParams | None = None
    stats: SearchStats | None = None
    providers: list[str] = ALL_PROVIDERS
    source: str | None = None
    lastUpdated: datetime


class UnifiedSearchResponse(BaseModel):
    meta: SearchMeta
    data: list[UnifiedHotelRecord] = []
    totalCount: int = 0
    error: str | None = None
    message: str | None = None


class Alert(BaseModel):
    id: str
    hotelId: str
    provider: Provider
    type: str  # "low_availability" | "price_drop"
    message: str
    urgency: UrgencyLevel
    timestamp: datetime


class InventoryMetadata(BaseModel):
    searchParams: SearchParams | None = None
    stats: SearchStats


class InventoryResponse(BaseModel):
    hotels: list[UnifiedHotelRecord]
    alerts: list[Alert]
    source: str
    lastUpdated: datetime
    metadata: InventoryMetadata
    error: str | None = None
    message: str | None = None


class ProviderMeta(BaseModel):
    count: int
    source: str  # "<provider>_api" | "fallback"
    provider: Provider
    searchParams: SearchParams


class ProviderSearchResponse(BaseModel):
    meta: ProviderMeta
    data: list[UnifiedHotelRecord]
    lastUpdated: datetime


class PetDetails(BaseModel):
    name: str = "Buddy"
    type: str = "dog"


class BookingRequest(BaseModel):
    hotelId: str | None = None
    guestName: str | None = None
    petDetails: PetDetails | None = None


class BookingConfirmation(BaseModel):
    bookingId: str
    status: str
    hotelId: str
    guestName: str
    petDetails: PetDetails


class RatingSentiments(BaseModel):
    staff: int
    location: int
    service: int
    roomComforts: int
    valueForMoney: int


class HotelRatings(BaseModel):
    hotelId: str
    overallRating: int
    sentiments: RatingSentiments


class HotelRatingsResponse(BaseModel):
    data: HotelRatings
