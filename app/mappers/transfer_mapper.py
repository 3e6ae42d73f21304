from datetime import datetime, timezone

from app.mappers.hotel_defaults import build_pet_policy, clamp_rating, positive_or
from app.schemas.activities import Capacity
from app.schemas.hotelbeds import HotelBedsTransfer, HotelBedsTransfersResponse
from app.schemas.transfers import (
    TransferEndpoint,
    TransferPetPolicy,
    TransferPricing,
    TransferRecord,
    TransferRemark,
    TransferRoute,
    TransferSchedule,
    TransferVehicle,
)

DEFAULT_RATING = 4.5
DEFAULT_TOTAL = 50.0
DEFAULT_NET = 45.0
DEFAULT_IMAGE = "https://images.unsplash.com/photo-1549317661-bd32c8ce0db2?w=800&h=600&fit=crop"
NETWORK_NAME = "Hotel Beds Transfer Network"
BASE_AMENITIES = ["Professional driver", "Climate control", "Luggage assistance"]
PET_AMENITIES = ["Pet-friendly service", "Pet amenities available"]
PET_RESTRICTIONS = [
    "Pets must be supervised",
    "Advance notification required",
    "Well-behaved pets only",
]


def _route(transfer: HotelBedsTransfer) -> TransferRoute:
    info = transfer.pickupInformation
    origin = info.from_ if info else None
    target = info.to if info else None
    pickup = info.pickup if info else None
    return TransferRoute(
        from_=TransferEndpoint(
            type=(origin.type if origin else None) or "Location",
            description=(origin.description if origin else None) or "Pickup location",
            location=(pickup.address if pickup else None) or "Address provided",
        ),
        to=TransferEndpoint(
            type=(target.type if target else None) or "Location",
            description=(target.description if target else None) or "Drop-off location",
            location=(target.description if target else None) or "Destination",
        ),
        duration="30-60 minutes",
        distance="Varies by route",
    )


def _schedule(transfer: HotelBedsTransfer) -> TransferSchedule:
    pickup = transfer.pickupInformation.pickup if transfer.pickupInformation else None
    check = pickup.checkPickup if pickup else None
    return TransferSchedule(
        pickupTime=(pickup.pickupTime if pickup else None) or "Flexible",
        waitTime=(pickup.waitTime if pickup else None) or 30,
        checkPickupRequired=bool(check and check.mustCheckPickupTime),
        hoursBeforeConsult=(check.hoursBeforeConsult if check else None) or 2,
    )


def normalize_transfer(
    transfer: HotelBedsTransfer,
    now: datetime | None = None,
) -> TransferRecord:
    """Map one Hotel Beds transfer onto the site's transfer shape."""
    route = _route(transfer)
    vehicle = transfer.vehicle
    vehicle_content = transfer.content.vehicle if transfer.content else None
    price = transfer.price
    pet_policy = TransferPetPolicy(
        **build_pet_policy(transfer.petFriendly, transfer.petFee, PET_RESTRICTIONS).model_dump()
    )
    remarks = transfer.content.transferRemarks if transfer.content else []

    return TransferRecord(
        id=transfer.id or "unknown",
        name=f"{route.from_.description} to {route.to.description}",
        type=transfer.transferType or "Transfer",
        category=(transfer.category.name if transfer.category else None) or "Standard",
        vehicle=TransferVehicle(
            type=(vehicle.name if vehicle else None) or "Standard Vehicle",
            capacity=Capacity(
                min=(vehicle.minPaxCapacity if vehicle else None) or 1,
                max=(vehicle.maxPaxCapacity if vehicle else None) or 4,
            ),
            description=(vehicle_content.description if vehicle_content else None)
            or "Comfortable vehicle with professional driver",
            images=[
                img.imageUrl for img in (vehicle_content.images if vehicle_content else [])
                if img.imageUrl
            ] or [DEFAULT_IMAGE],
        ),
        route=route,
        pricing=TransferPricing(
            total=positive_or(price.totalAmount if price else None, DEFAULT_TOTAL),
            net=positive_or(price.netAmount if price else None, DEFAULT_NET),
            currency=(price.currencyId if price else None) or "EUR",
        ),
        petPolicy=pet_policy,
        schedule=_schedule(transfer),
        amenities=BASE_AMENITIES + (PET_AMENITIES if pet_policy.allowed else []),
        rating=clamp_rating(transfer.rating if transfer.rating is not None else DEFAULT_RATING),
        provider=NETWORK_NAME,
        remarks=[
            TransferRemark(
                type=r.type or "info",
                description=r.description or "",
                mandatory=bool(r.mandatory),
            )
            for r in remarks
        ],
        lastUpdated=now or datetime.now(timezone.utc),
    )


def normalize_transfers(
    response: HotelBedsTransfersResponse | None,
    now: datetime | None = None,
) -> list[TransferRecord]:
    if response is None or not response.transfers:
        return []
    now = now or datetime.now(timezone.utc)
    return [normalize_transfer(transfer, now=now) for transfer in response.transfers]
