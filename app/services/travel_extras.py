import logging
from datetime import datetime, timezone

from app.exceptions.custom import ExtrasLookupError
from app.mappers.activity_mapper import normalize_activities
from app.mappers.fallback import FALLBACK_SOURCE, fallback_activities, fallback_transfers
from app.mappers.transfer_mapper import normalize_transfers
from app.schemas.activities import ActivityRecord, ActivitySearchParams
from app.schemas.transfers import TransferRecord, TransferSearchParams
from app.services.hotelbeds_extras import HotelBedsActivitiesService, HotelBedsTransfersService

logger = logging.getLogger(__name__)

ACTIVITIES_SOURCE = "hotelbeds_activities_api"
TRANSFERS_SOURCE = "hotelbeds_transfers_api"


class TravelExtrasService:
    """Activities and transfers around a hotel stay, with fallback inventory
    when Hotel Beds has nothing to offer."""

    def __init__(
        self,
        activities: HotelBedsActivitiesService,
        transfers: HotelBedsTransfersService,
    ):
        self._activities = activities
        self._transfers = transfers

    async def search_activities(
        self, params: ActivitySearchParams,
    ) -> tuple[list[ActivityRecord], str]:
        raw = await self._activities.search_activities(params)
        try:
            now = datetime.now(timezone.utc)
            records = normalize_activities(raw, now=now)
            source = ACTIVITIES_SOURCE
            if not records:
                logger.info("No live activities for %s, serving fallback", params.destination)
                records, source = fallback_activities(now=now), FALLBACK_SOURCE
        except Exception as exc:
            logger.exception("Activity normalization failed")
            raise ExtrasLookupError("activities", str(exc)) from exc

        if params.petFriendly:
            records = [r for r in records if r.petPolicy.allowed]
        return records, source

    async def search_transfers(
        self, params: TransferSearchParams,
    ) -> tuple[list[TransferRecord], str]:
        raw = await self._transfers.search_transfers(params)
        try:
            now = datetime.now(timezone.utc)
            records = normalize_transfers(raw, now=now)
            source = TRANSFERS_SOURCE
            if not records:
                logger.info("No live transfers from %s, serving fallback", params.from_)
                records, source = fallback_transfers(now=now), FALLBACK_SOURCE
        except Exception as exc:
            logger.exception("Transfer normalization failed")
            raise ExtrasLookupError("transfers", str(exc)) from exc

        if params.petFriendly:
            records = [r for r in records if r.petPolicy.allowed]
        return records, source
