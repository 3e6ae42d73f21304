from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from app.schemas.activities import Capacity
from app.schemas.hotels import PetPolicy
from app.schemas.search import WireFlag


class TransferVehicle(BaseModel):
    type: str
    capacity: Capacity
    description: str
    images: list[str] = []


class TransferEndpoint(BaseModel):
    type: str
    description: str
    location: str


class TransferRoute(BaseModel):
    model_config = {"populate_by_name": True}

    from_: TransferEndpoint = Field(alias="from")
    to: TransferEndpoint
    duration: str
    distance: str


class TransferPricing(BaseModel):
    total: float = Field(ge=0)
    net: float = Field(ge=0)
    currency: str = "EUR"
    perVehicle: bool = True


class PetCarrier(BaseModel):
    required: bool = False
    provided: bool = False
    maxSize: str = "Medium (up to 15kg)"


class TransferPetPolicy(PetPolicy):
    carrier: PetCarrier = PetCarrier()


class TransferSchedule(BaseModel):
    pickupTime: str
    waitTime: int
    checkPickupRequired: bool
    hoursBeforeConsult: int


class TransferRemark(BaseModel):
    type: str
    description: str
    mandatory: bool = False


class TransferRecord(BaseModel):
    id: str
    name: str
    type: str
    category: str
    vehicle: TransferVehicle
    route: TransferRoute
    pricing: TransferPricing
    petPolicy: TransferPetPolicy
    schedule: TransferSchedule
    amenities: list[str] = []
    rating: float = Field(ge=0, le=5)
    provider: str
    remarks: list[TransferRemark] = []
    lastUpdated: datetime


class TransferSearchParams(BaseModel):
    model_config = {"populate_by_name": True}

    from_: str = Field(default="MAD", alias="from")
    to: str = "madrid"
    type: str = "PRIVATE"
    pax: int = 2
    petFriendly: WireFlag = False

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
        return data


class TransfersMeta(BaseModel):
    count: int
    source: str  # "hotelbeds_transfers_api" | "fallback" | "fallback_error"
    provider: str = "hotelbeds_transfers"
    searchParams: TransferSearchParams | None = None


class TransfersResponse(BaseModel):
    meta: TransfersMeta
    data: list[TransferRecord]
    lastUpdated: datetime
    error: str | None = None
