"""Intermediate models for Amadeus hotel list and hotel offers payloads.

Every field is optional so sparse records validate; the mapper owns the
defaulting policy. A payload whose types cannot be coerced fails validation
and is reported by the adapter as malformed.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class _AmadeusModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, allow_inf_nan=False, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class AmadeusGeoCode(_AmadeusModel):
    latitude: float | None = None
    longitude: float | None = None


class AmadeusAddress(_AmadeusModel):
    countryCode: str | None = None
    cityName: str | None = None
    postalCode: str | None = None
    lines: list[str] = []
    latitude: float | None = None
    longitude: float | None = None


class AmadeusAvailability(_AmadeusModel):
    roomsAvailable: int | None = None
    urgencyLevel: str | None = None


class AmadeusHotel(_AmadeusModel):
    hotelId: str | None = None
    id: str | None = None
    name: str | None = None
    chainCode: str | None = None
    iataCode: str | None = None
    geoCode: AmadeusGeoCode | None = None
    address: AmadeusAddress | None = None
    priceRange: str | None = None
    price: float | None = None
    originalPrice: float | None = None
    currency: str | None = None
    petFriendly: bool | None = None
    petFee: float | None = None
    rating: float | None = None
    amenities: list[str] | None = None
    images: list[str] | None = None
    availability: AmadeusAvailability | None = None
    roomsLeft: int | None = None
    urgencyLevel: str | None = None
    lastUpdate: datetime | None = None


class AmadeusHotelListResponse(_AmadeusModel):
    data: list[AmadeusHotel] = []
    meta: dict | None = None


class AmadeusOfferPrice(_AmadeusModel):
    currency: str | None = None
    total: float | None = None
    base: float | None = None


class AmadeusRoomEstimate(_AmadeusModel):
    category: str | None = None
    beds: int | None = None
    bedType: str | None = None


class AmadeusOfferRoom(_AmadeusModel):
    type: str | None = None
    typeEstimated: AmadeusRoomEstimate | None = None


class AmadeusCancellation(_AmadeusModel):
    deadline: str | None = None


class AmadeusOfferPolicies(_AmadeusModel):
    paymentType: str | None = None
    cancellation: AmadeusCancellation | None = None


class AmadeusOffer(_AmadeusModel):
    id: str | None = None
    price: AmadeusOfferPrice | None = None
    policies: AmadeusOfferPolicies | None = None
    room: AmadeusOfferRoom | None = None


class AmadeusOfferHotel(_AmadeusModel):
    hotelId: str | None = None
    name: str | None = None
    rating: float | None = None
    amenities: list[str] | None = None


class AmadeusHotelOffers(_AmadeusModel):
    """One entry of the hotel-offers payload. Inventory fields beyond the
    public Amadeus schema are optional extensions."""

    id: str | None = None
    hotel: AmadeusOfferHotel | None = None
    available: bool | None = None
    offers: list[AmadeusOffer] = []
    roomsLeft: int | None = None
    urgencyLevel: str | None = None
    trending: str | None = None
    petFriendly: bool | None = None
    petFee: float | None = None


class AmadeusHotelOffersResponse(_AmadeusModel):
    data: list[AmadeusHotelOffers] | None = None
    meta: dict | None = None
