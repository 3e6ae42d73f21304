from collections.abc import Iterable
from datetime import datetime, timezone

from app.schemas.hotels import PROVIDER_DISPLAY_NAMES, Provider, UnifiedHotelRecord, UrgencyLevel
from app.schemas.live import LiveHotel
from app.schemas.responses import Alert

LOW_AVAILABILITY_THRESHOLD = 5


def build_alert(hotel: UnifiedHotelRecord, now: datetime) -> Alert | None:
    rooms_left = hotel.availability.roomsLeft
    low_stock = rooms_left <= LOW_AVAILABILITY_THRESHOLD
    if not low_stock and hotel.availability.urgencyLevel != UrgencyLevel.high:
        return None

    if low_stock:
        alert_type = "low_availability"
        message = f"Only {rooms_left} rooms left at {hotel.name}!"
    else:
        alert_type = "price_drop"
        message = f"Special deal at {hotel.name} via {PROVIDER_DISPLAY_NAMES[hotel.provider]}"

    return Alert(
        id=f"alert_{hotel.id}",
        hotelId=hotel.hotelId,
        provider=hotel.provider,
        type=alert_type,
        message=message,
        urgency=hotel.availability.urgencyLevel,
        timestamp=now,
    )


def build_alerts(
    hotels: Iterable[UnifiedHotelRecord],
    now: datetime | None = None,
) -> list[Alert]:
    """One alert per scarce or high-urgency hotel, in input order."""
    now = now or datetime.now(timezone.utc)
    alerts = []
    for hotel in hotels:
        alert = build_alert(hotel, now)
        if alert is not None:
            alerts.append(alert)
    return alerts


def build_live_alerts(
    hotels: Iterable[LiveHotel],
    now: datetime | None = None,
) -> list[Alert]:
    """Scarcity alerts for live rows; high urgency with stock left reads as a deal."""
    now = now or datetime.now(timezone.utc)
    alerts = []
    for hotel in hotels:
        low_stock = hotel.roomsLeft <= LOW_AVAILABILITY_THRESHOLD
        if not low_stock and hotel.urgencyLevel != UrgencyLevel.high:
            continue
        alerts.append(
            Alert(
                id=f"alert_{hotel.id}",
                hotelId=hotel.hotelId,
                provider=Provider.amadeus,
                type="low_availability" if low_stock else "price_drop",
                message=(
                    f"Only {hotel.roomsLeft} rooms left at {hotel.name}!"
                    if low_stock
                    else f"Price dropped 15% at {hotel.name}"
                ),
                urgency=hotel.urgencyLevel,
                timestamp=now,
            )
        )
    return alerts
