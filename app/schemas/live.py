from datetime import date, datetime

from pydantic import BaseModel, model_validator

from app.schemas.hotels import UrgencyLevel
from app.schemas.responses import Alert

DEFAULT_LIVE_HOTEL_IDS = "MCLONGHM"


class LiveInventoryParams(BaseModel):
    hotelIds: str = DEFAULT_LIVE_HOTEL_IDS
    checkInDate: date | None = None
    adults: int = 1
    roomQuantity: int = 1

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
        return data

    @property
    def hotel_id_list(self) -> list[str]:
        return [h.strip() for h in self.hotelIds.split(",") if h.strip()]


class LiveOffer(BaseModel):
    id: str
    roomType: str
    bedType: str
    beds: int
    price: float
    currency: str
    cancellationPolicy: str
    paymentType: str


class LiveHotel(BaseModel):
    id: str
    hotelId: str
    name: str
    rating: float
    available: bool
    roomsLeft: int
    price: float
    currency: str
    originalPrice: float
    petFriendly: bool
    petFee: float
    lastUpdated: datetime
    trending: str  # "up" | "down" | "stable"
    urgencyLevel: UrgencyLevel
    dealExpires: datetime
    amenities: list[str] = []
    offers: list[LiveOffer] = []


class LiveInventoryMetadata(BaseModel):
    searchParams: LiveInventoryParams
    totalHotels: int
    petFriendlyCount: int


class LiveInventoryResponse(BaseModel):
    hotels: list[LiveHotel]
    alerts: list[Alert]
    lastUpdated: datetime
    source: str  # "amadeus_api_enhanced" | "fallback_data"
    metadata: LiveInventoryMetadata | None = None
    error: str | None = None
