from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _HotelBedsModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, allow_inf_nan=False, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class HotelBedsCancellationPolicy(_HotelBedsModel):
    amount: float | None = None
    hotelCurrency: str | None = None


class HotelBedsRate(_HotelBedsModel):
    rateKey: str | None = None
    rateType: str | None = None
    net: float | None = None
    sellingRate: float | None = None
    amount: float | None = None
    allotment: int | None = None
    boardName: str | None = None
    paymentType: str | None = None
    adults: int | None = None
    children: int | None = None
    cancellationPolicies: list[HotelBedsCancellationPolicy] = []


class HotelBedsRoom(_HotelBedsModel):
    code: str | None = None
    name: str | None = None
    rates: list[HotelBedsRate] = []


class HotelBedsHotel(_HotelBedsModel):
    code: str | None = None
    name: str | None = None
    categoryCode: str | None = None
    categoryName: str | None = None
    destinationCode: str | None = None
    destinationName: str | None = None
    zoneCode: str | None = None
    zoneName: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    minRate: float | None = None
    maxRate: float | None = None
    totalNet: float | None = None
    totalSellingRate: float | None = None
    currency: str | None = None
    rooms: list[HotelBedsRoom] = []
    petFriendly: bool | None = None
    petFee: float | None = None
    rating: float | None = None
    amenities: list[str] | None = None
    lastUpdated: datetime | None = None


class HotelBedsHotels(_HotelBedsModel):
    checkIn: str | None = None
    checkOut: str | None = None
    total: int | None = None
    currency: str | None = None
    hotels: list[HotelBedsHotel] = []


class HotelBedsAvailabilityResponse(_HotelBedsModel):
    hotels: HotelBedsHotels | None = None

    @property
    def hotel_list(self) -> list[HotelBedsHotel]:
        return self.hotels.hotels if self.hotels else []

    @property
    def currency(self) -> str | None:
        return self.hotels.currency if self.hotels else None


class HotelBedsNamedCode(_HotelBedsModel):
    code: str | None = None
    name: str | None = None


class HotelBedsDuration(_HotelBedsModel):
    value: float | None = None
    metric: str | None = None


class HotelBedsAmountFrom(_HotelBedsModel):
    paxType: str | None = None
    ageFrom: int | None = None
    ageTo: int | None = None
    amount: float | None = None
    currencyId: str | None = None


class HotelBedsOperatingDay(_HotelBedsModel):
    dayOfTheWeek: int | None = None


class HotelBedsImage(_HotelBedsModel):
    imageUrl: str | None = None


class HotelBedsActivityContent(_HotelBedsModel):
    images: list[HotelBedsImage] = []


class HotelBedsActivity(_HotelBedsModel):
    code: str | None = None
    name: str | None = None
    type: str | None = None
    country: HotelBedsNamedCode | None = None
    destination: HotelBedsNamedCode | None = None
    category: HotelBedsNamedCode | None = None
    modality: HotelBedsNamedCode | None = None
    duration: HotelBedsDuration | None = None
    languages: list[HotelBedsNamedCode] = []
    amountsFrom: list[HotelBedsAmountFrom] = []
    description: str | None = None
    operatingDays: list[HotelBedsOperatingDay] = []
    minPaxForReservation: int | None = None
    maxPaxForReservation: int | None = None
    content: HotelBedsActivityContent | None = None
    petFriendly: bool | None = None
    petFee: float | None = None
    rating: float | None = None


class HotelBedsActivitiesResponse(_HotelBedsModel):
    activities: list[HotelBedsActivity] | None = None


class HotelBedsVehicle(_HotelBedsModel):
    code: str | None = None
    name: str | None = None
    minPaxCapacity: int | None = None
    maxPaxCapacity: int | None = None


class HotelBedsTransferPoint(_HotelBedsModel):
    code: str | None = None
    description: str | None = None
    type: str | None = None


class HotelBedsCheckPickup(_HotelBedsModel):
    mustCheckPickupTime: bool | None = None
    hoursBeforeConsult: int | None = None


class HotelBedsPickup(_HotelBedsModel):
    address: str | None = None
    pickupTime: str | None = None
    waitTime: int | None = None
    checkPickup: HotelBedsCheckPickup | None = None


class HotelBedsPickupInformation(_HotelBedsModel):
    from_: HotelBedsTransferPoint | None = Field(default=None, alias="from")
    to: HotelBedsTransferPoint | None = None
    pickup: HotelBedsPickup | None = None


class HotelBedsTransferPrice(_HotelBedsModel):
    totalAmount: float | None = None
    netAmount: float | None = None
    currencyId: str | None = None


class HotelBedsVehicleContent(_HotelBedsModel):
    description: str | None = None
    images: list[HotelBedsImage] = []


class HotelBedsTransferRemark(_HotelBedsModel):
    type: str | None = None
    description: str | None = None
    mandatory: bool | None = None


class HotelBedsTransferContent(_HotelBedsModel):
    vehicle: HotelBedsVehicleContent | None = None
    transferRemarks: list[HotelBedsTransferRemark] = []


class HotelBedsTransfer(_HotelBedsModel):
    id: str | None = None
    transferType: str | None = None
    vehicle: HotelBedsVehicle | None = None
    category: HotelBedsNamedCode | None = None
    pickupInformation: HotelBedsPickupInformation | None = None
    price: HotelBedsTransferPrice | None = None
    content: HotelBedsTransferContent | None = None
    direction: str | None = None
    petFriendly: bool | None = None
    petFee: float | None = None
    rating: float | None = None


class HotelBedsTransfersResponse(_HotelBedsModel):
    transfers: list[HotelBedsTransfer] | None = None
