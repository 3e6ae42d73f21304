from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from app.schemas.hotels import PetPolicy
from app.schemas.search import WireFlag

DEFAULT_ACTIVITY_DESTINATION = "BCN"


class ActivityDuration(BaseModel):
    value: float
    unit: str
    display: str


class ActivityPricing(BaseModel):
    model_config = {"populate_by_name": True}

    from_: float = Field(alias="from", ge=0)
    currency: str = "EUR"
    perPerson: bool = True


class Capacity(BaseModel):
    min: int
    max: int


class AgeRestrictions(BaseModel):
    minAge: int
    maxAge: int


class ActivitySchedule(BaseModel):
    operatingDays: list[str]
    frequency: str


class ActivityRecord(BaseModel):
    code: str
    name: str
    type: str
    category: str
    destination: str
    country: str
    description: str
    duration: ActivityDuration
    pricing: ActivityPricing
    petPolicy: PetPolicy
    capacity: Capacity
    ageRestrictions: AgeRestrictions
    schedule: ActivitySchedule
    images: list[str] = []
    rating: float = Field(ge=0, le=5)
    languages: list[str] = []
    highlights: list[str] = []
    lastUpdated: datetime


class ActivitySearchParams(BaseModel):
    destination: str = DEFAULT_ACTIVITY_DESTINATION
    language: str = "en"
    dateFrom: date | None = None
    dateTo: date | None = None
    petFriendly: WireFlag = False

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_values(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
        return data


class ActivitiesMeta(BaseModel):
    count: int
    source: str  # "hotelbeds_activities_api" | "fallback" | "fallback_error"
    provider: str = "hotelbeds_activities"
    searchParams: ActivitySearchParams | None = None


class ActivitiesResponse(BaseModel):
    meta: ActivitiesMeta
    data: list[ActivityRecord]
    lastUpdated: datetime
    error: str | None = None
